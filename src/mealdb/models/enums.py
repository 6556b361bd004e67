"""Enumerations for the meal model."""

from __future__ import annotations

from enum import StrEnum


class MealState(StrEnum):
    """Completion state of a meal.

    - MINIMAL: built from a filter row (id, name, thumbnail only)
    - COMPLETE: every field populated from a search/lookup row
    """

    MINIMAL = "minimal"
    COMPLETE = "complete"


class ThumbnailSize(StrEnum):
    """Image size suffixes served by the TheMealDB image host."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, token: ThumbnailSize | str | None) -> ThumbnailSize:
        """Resolve a size token, case-insensitively.

        Empty or unrecognized tokens resolve to MEDIUM.
        """
        if token is None:
            return cls.MEDIUM
        try:
            return cls(str(token).strip().lower())
        except ValueError:
            return cls.MEDIUM
