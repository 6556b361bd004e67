"""TheMealDB endpoint names and list kinds."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


SEARCH_ENDPOINT: Final[str] = "search.php"
LOOKUP_ENDPOINT: Final[str] = "lookup.php"
RANDOM_ENDPOINT: Final[str] = "random.php"
CATEGORIES_ENDPOINT: Final[str] = "categories.php"
LIST_ENDPOINT: Final[str] = "list.php"
FILTER_ENDPOINT: Final[str] = "filter.php"


class ListKind(StrEnum):
    """Kinds of values ``list.php`` can enumerate."""

    CATEGORY = "category"
    AREA = "area"
    INGREDIENT = "ingredient"

    @property
    def query_key(self) -> str:
        """Query parameter selecting this kind, e.g. ``c`` in ``c=list``."""
        return LIST_QUERY_KEYS[self]

    @classmethod
    def parse(cls, token: ListKind | str) -> ListKind | None:
        """Resolve a kind token case-insensitively, or None if unknown."""
        try:
            return cls(str(token).strip().lower())
        except ValueError:
            return None


LIST_QUERY_KEYS: Final[dict[ListKind, str]] = {
    ListKind.CATEGORY: "c",
    ListKind.AREA: "a",
    ListKind.INGREDIENT: "i",
}
