"""Ingredient value objects attached to complete meals."""

from __future__ import annotations

from dataclasses import dataclass

from mealdb.models.enums import ThumbnailSize


@dataclass(frozen=True, slots=True)
class IngredientImages:
    """Ingredient image URLs at each size the image host serves."""

    small: str
    medium: str
    large: str

    def get(self, size: ThumbnailSize | str = ThumbnailSize.MEDIUM) -> str:
        """Return the URL for a size token (unknown tokens give medium)."""
        return getattr(self, ThumbnailSize.parse(size).value)


@dataclass(frozen=True, slots=True)
class IngredientLine:
    """One ingredient of a meal, in the order the API lists it."""

    measure: str  # "" when the API gives no measure
    ingredient: str
    images: IngredientImages
