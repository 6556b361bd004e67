"""Row normalization and ingredient extraction."""

from mealdb.parsing.fields import (
    nullable_string,
    nullable_title_case,
    parse_meal_id,
    parse_modified,
    title_case,
)
from mealdb.parsing.ingredients import (
    INGREDIENT_IMAGE_BASE,
    MAX_INGREDIENT_SLOTS,
    build_ingredient_images,
    extract_ingredients,
    ingredient_image_stem,
)


__all__ = [
    "INGREDIENT_IMAGE_BASE",
    "MAX_INGREDIENT_SLOTS",
    "build_ingredient_images",
    "extract_ingredients",
    "ingredient_image_stem",
    "nullable_string",
    "nullable_title_case",
    "parse_meal_id",
    "parse_modified",
    "title_case",
]
