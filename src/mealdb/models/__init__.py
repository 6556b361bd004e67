"""Meal model and its value objects."""

from mealdb.models.enums import MealState, ThumbnailSize
from mealdb.models.ingredient import IngredientImages, IngredientLine
from mealdb.models.meal import Meal, MealLoader


__all__ = [
    "IngredientImages",
    "IngredientLine",
    "Meal",
    "MealLoader",
    "MealState",
    "ThumbnailSize",
]
