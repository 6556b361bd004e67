"""Meal entity with lazy completion.

TheMealDB filter endpoints return partial rows (``idMeal``, ``strMeal``,
``strMealThumb``), while search and lookup endpoints return every field.
Both become a ``Meal``. A minimal meal completes itself on the first read
of a full-only field by asking its loader for the full record, then copies
that record into itself. The transition happens at most once.

Example:
    ```python
    with TheMealDBClient() as client:
        meals = client.filter_by_area("Canadian")
        meals[0].name          # no request
        meals[0].instructions  # lookup.php?i=<id>, then cached on the meal
    ```
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Final, Protocol, runtime_checkable

from mealdb.core.exceptions import (
    HydrationFailedError,
    MealDBRequestError,
    MealValidationError,
    NoLoaderError,
)
from mealdb.models.enums import MealState, ThumbnailSize
from mealdb.observability.logging import get_logger
from mealdb.parsing.fields import (
    nullable_string,
    nullable_title_case,
    parse_meal_id,
    parse_modified,
    title_case,
)
from mealdb.parsing.ingredients import extract_ingredients


if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from mealdb.models.ingredient import IngredientLine

logger = get_logger(__name__)


@runtime_checkable
class MealLoader(Protocol):
    """Loads the complete record for a meal id.

    ``TheMealDBClient`` implements this; tests pass fakes.
    """

    def load_meal(self, meal_id: int) -> Meal | None:
        """Return the complete meal, or None if the id is unknown."""
        ...


# Attributes copied from the loaded record on hydration (loaded value wins)
_HYDRATED_FIELDS: Final[tuple[str, ...]] = (
    "_name",
    "_thumbnail_base",
    "_alternate_name",
    "_category",
    "_area",
    "_instructions",
    "_tags",
    "_video_url",
    "_ingredients",
    "_source",
    "_image_source",
    "_creative_commons_confirmed",
    "_modified_at",
)


class Meal:
    """A TheMealDB meal, either minimal or complete.

    Use ``Meal.from_minimal_row`` or ``Meal.from_full_row`` to build one.

    Minimal-set properties (``id``, ``name``, ``thumbnail_base``) and
    ``get_thumbnail`` never trigger a lookup. Every other property calls
    ``ensure_complete`` first.

    Hydration is guarded by a per-instance lock, so concurrent readers of
    one minimal meal cause a single lookup.
    """

    def __init__(
        self,
        meal_id: int,
        name: str,
        *,
        thumbnail_base: str | None = None,
        loader: MealLoader | None = None,
    ) -> None:
        """Initialize a minimal meal.

        Args:
            meal_id: Positive TheMealDB id.
            name: Display name, already normalized.
            thumbnail_base: Image URL without a size suffix.
            loader: Source of the complete record.

        Raises:
            MealValidationError: If ``meal_id <= 0`` or ``name`` is empty.
        """
        if meal_id <= 0 or not name:
            raise MealValidationError(meal_id, name)

        self._id = meal_id
        self._name = name
        self._thumbnail_base = thumbnail_base
        self._loader = loader
        self._state = MealState.MINIMAL
        self._lock = threading.Lock()

        self._alternate_name: str | None = None
        self._category: str | None = None
        self._area: str | None = None
        self._instructions: str | None = None
        self._tags: str | None = None
        self._video_url: str | None = None
        self._ingredients: tuple[IngredientLine, ...] = ()
        self._source: str | None = None
        self._image_source: str | None = None
        self._creative_commons_confirmed: str | None = None
        self._modified_at: datetime | None = None

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_minimal_row(
        cls,
        row: Mapping[str, Any],
        loader: MealLoader | None = None,
    ) -> Meal:
        """Build a minimal meal from a filter endpoint row.

        Raises:
            MealValidationError: If the row has no positive id or no name.
        """
        return cls(
            parse_meal_id(row.get("idMeal")),
            title_case(str(row.get("strMeal") or "")),
            thumbnail_base=nullable_string(row.get("strMealThumb")),
            loader=loader,
        )

    @classmethod
    def from_full_row(
        cls,
        row: Mapping[str, Any],
        loader: MealLoader | None = None,
    ) -> Meal:
        """Build a complete meal from a search/lookup/random row.

        Raises:
            MealValidationError: If the row has no positive id or no name.
        """
        meal = cls.from_minimal_row(row, loader)

        meal._alternate_name = nullable_string(row.get("strMealAlternate"))
        meal._category = nullable_title_case(row.get("strCategory"))
        meal._area = nullable_title_case(row.get("strArea"))
        meal._instructions = nullable_string(row.get("strInstructions"))
        meal._tags = nullable_string(row.get("strTags"))
        meal._video_url = nullable_string(row.get("strYoutube"))
        meal._ingredients = tuple(extract_ingredients(row))
        meal._source = nullable_string(row.get("strSource"))
        meal._image_source = nullable_string(row.get("strImageSource"))
        meal._creative_commons_confirmed = nullable_string(
            row.get("strCreativeCommonsConfirmed")
        )
        meal._modified_at = parse_modified(row.get("dateModified"))
        meal._state = MealState.COMPLETE

        return meal

    # =========================================================================
    # Minimal fields (never trigger a lookup)
    # =========================================================================

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def thumbnail_base(self) -> str | None:
        return self._thumbnail_base

    @property
    def state(self) -> MealState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state is MealState.COMPLETE

    def get_thumbnail(self, size: ThumbnailSize | str = ThumbnailSize.MEDIUM) -> str:
        """Return the thumbnail URL for a size token.

        The token is trimmed and matched case-insensitively; empty or
        unknown tokens give the medium size.

        Returns:
            ``<thumbnail_base>/<size>``, or "" when the meal has no thumbnail.
        """
        if not self._thumbnail_base:
            return ""
        return f"{self._thumbnail_base.rstrip('/')}/{ThumbnailSize.parse(size).value}"

    # =========================================================================
    # Full fields (complete the meal first)
    # =========================================================================

    @property
    def alternate_name(self) -> str | None:
        self.ensure_complete()
        return self._alternate_name

    @property
    def category(self) -> str | None:
        self.ensure_complete()
        return self._category

    @property
    def area(self) -> str | None:
        self.ensure_complete()
        return self._area

    @property
    def instructions(self) -> str | None:
        self.ensure_complete()
        return self._instructions

    @property
    def tags(self) -> str | None:
        """Raw comma-separated tags, e.g. ``"Meat,Pie"``."""
        self.ensure_complete()
        return self._tags

    @property
    def tag_list(self) -> list[str]:
        """Tags split on commas, blanks dropped."""
        tags = self.tags
        if not tags:
            return []
        return [tag.strip() for tag in tags.split(",") if tag.strip()]

    @property
    def video_url(self) -> str | None:
        self.ensure_complete()
        return self._video_url

    @property
    def ingredients(self) -> tuple[IngredientLine, ...]:
        self.ensure_complete()
        return self._ingredients

    @property
    def source(self) -> str | None:
        self.ensure_complete()
        return self._source

    @property
    def image_source(self) -> str | None:
        self.ensure_complete()
        return self._image_source

    @property
    def creative_commons_confirmed(self) -> str | None:
        self.ensure_complete()
        return self._creative_commons_confirmed

    @property
    def modified_at(self) -> datetime | None:
        self.ensure_complete()
        return self._modified_at

    # =========================================================================
    # Lazy completion
    # =========================================================================

    def ensure_complete(self) -> None:
        """Complete this meal from its loader, once.

        Returns immediately when the meal is already complete. Otherwise
        the loader is called with this meal's id and every field of the
        loaded meal, including ``name`` and ``thumbnail_base``, replaces
        the current value. On failure the meal is left unchanged.

        Raises:
            NoLoaderError: If the meal is minimal and has no loader.
            HydrationFailedError: If the loader returns nothing usable or
                its request fails.
        """
        if self._state is MealState.COMPLETE:
            return

        with self._lock:
            # Another thread may have completed the meal while we waited
            if self._state is MealState.COMPLETE:
                return

            if self._loader is None:
                raise NoLoaderError(self._id)

            logger.debug("Completing minimal meal", meal_id=self._id)

            try:
                loaded = self._loader.load_meal(self._id)
            except (MealDBRequestError, MealValidationError) as e:
                logger.warning(
                    "Meal lookup failed during completion",
                    meal_id=self._id,
                    error=str(e),
                )
                raise HydrationFailedError(self._id, str(e)) from e

            if not isinstance(loaded, Meal) or not loaded.is_complete:
                logger.warning(
                    "Meal lookup returned no complete meal",
                    meal_id=self._id,
                    result_type=type(loaded).__name__,
                )
                raise HydrationFailedError(self._id, "lookup returned no complete meal")

            for attr in _HYDRATED_FIELDS:
                setattr(self, attr, getattr(loaded, attr))
            self._state = MealState.COMPLETE

            logger.debug("Meal completed", meal_id=self._id, name=self._name)

    def __repr__(self) -> str:
        return f"Meal(id={self._id}, name={self._name!r}, state={self._state.value})"
