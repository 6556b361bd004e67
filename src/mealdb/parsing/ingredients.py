"""Ingredient extraction from full TheMealDB rows.

Full rows carry up to 20 indexed slot pairs, ``strIngredient1..20`` and
``strMeasure1..20``. Unused slots are empty strings or null.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

from mealdb.models.ingredient import IngredientImages, IngredientLine
from mealdb.parsing.fields import nullable_string, title_case


if TYPE_CHECKING:
    from collections.abc import Mapping


MAX_INGREDIENT_SLOTS: Final[int] = 20
INGREDIENT_IMAGE_BASE: Final[str] = "https://www.themealdb.com/images/ingredients/"

_WHITESPACE_RUN = re.compile(r"\s+")


def ingredient_image_stem(raw_name: str) -> str:
    """Build the image filename stem for an ingredient.

    The raw API name is lowercased and each whitespace run becomes a dash,
    e.g. ``"Beef  Steak"`` -> ``"beef-steak"``.
    """
    return _WHITESPACE_RUN.sub("-", raw_name.strip().lower())


def build_ingredient_images(raw_name: str) -> IngredientImages:
    """Build small/medium/large image URLs for an ingredient."""
    base = INGREDIENT_IMAGE_BASE + ingredient_image_stem(raw_name)
    return IngredientImages(
        small=f"{base}-small.png",
        medium=f"{base}-medium.png",
        large=f"{base}-large.png",
    )


def extract_ingredients(row: Mapping[str, Any]) -> list[IngredientLine]:
    """Extract ingredient lines from a full meal row.

    Slots are read in index order. A slot whose ingredient is missing or
    blank is skipped, whatever its measure says.

    Args:
        row: Raw meal row from a search/lookup/random response.

    Returns:
        Ingredient lines in source order.
    """
    lines: list[IngredientLine] = []

    for index in range(1, MAX_INGREDIENT_SLOTS + 1):
        raw_name = nullable_string(row.get(f"strIngredient{index}"))
        if raw_name is None:
            continue

        measure = nullable_string(row.get(f"strMeasure{index}")) or ""

        lines.append(
            IngredientLine(
                measure=measure,
                ingredient=title_case(raw_name),
                images=build_ingredient_images(raw_name),
            )
        )

    return lines
