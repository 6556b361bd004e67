"""Response envelopes for TheMealDB endpoints.

Every endpoint wraps its rows in a single top-level key, which is null
when nothing matches. Rows stay untyped dicts here; meals are built from
them by the ``Meal`` factories.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _rows_or_none(value: Any) -> list[dict[str, Any]] | None:
    """Keep object rows from a list; anything that is not a list is no rows."""
    if not isinstance(value, list):
        return None
    return [row for row in value if isinstance(row, dict)]


Rows = Annotated[list[dict[str, Any]] | None, BeforeValidator(_rows_or_none)]


class _Envelope(BaseModel):
    """Base envelope; the API may add keys we don't read."""

    model_config = ConfigDict(extra="ignore")


class MealsEnvelope(_Envelope):
    """``{"meals": [...] | null}`` from search, lookup, random, filter and list."""

    meals: Rows = None

    @property
    def rows(self) -> list[dict[str, Any]]:
        return self.meals or []


class CategoriesEnvelope(_Envelope):
    """``{"categories": [...]}`` from categories.php."""

    categories: Rows = None

    @property
    def rows(self) -> list[dict[str, Any]]:
        return self.categories or []
