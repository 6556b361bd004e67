"""TheMealDB API client.

This module provides a synchronous HTTP client for the public TheMealDB
JSON API. Search, lookup and random endpoints return complete meals;
filter endpoints return minimal meals bound to this client, which
complete themselves through ``lookup_by_id`` when a full field is read.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import httpx
import orjson

from mealdb.clients.themealdb.constants import (
    CATEGORIES_ENDPOINT,
    FILTER_ENDPOINT,
    LIST_ENDPOINT,
    LOOKUP_ENDPOINT,
    RANDOM_ENDPOINT,
    SEARCH_ENDPOINT,
    ListKind,
)
from mealdb.clients.themealdb.schemas import CategoriesEnvelope, MealsEnvelope
from mealdb.core.config import get_settings
from mealdb.core.exceptions import MealDBRequestError
from mealdb.models.meal import Meal
from mealdb.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from mealdb.core.config import MealDBSettings


logger = get_logger(__name__)


class TheMealDBClient:
    """HTTP client for TheMealDB.

    Every request is retried on any ``httpx.RequestError``, non-2xx
    responses, empty bodies and invalid JSON, up to ``max_retries`` times,
    sleeping ``retry_backoff * attempt`` seconds between attempts.

    The client implements ``MealLoader`` and binds itself to every meal it
    builds.

    Example:
        ```python
        with TheMealDBClient() as client:
            for meal in client.filter_by_category("Seafood"):
                print(meal.name, meal.area)  # area triggers a lookup
        ```
    """

    def __init__(
        self,
        config: MealDBSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings; defaults to ``get_settings().api``.
            http_client: HTTP client to use. When omitted, one is created
                from ``config`` and closed by ``close()``.
        """
        self.config = config if config is not None else get_settings().api
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else self._build_http_client()

    def _build_http_client(self) -> httpx.Client:
        client = httpx.Client(
            timeout=httpx.Timeout(
                self.config.timeout,
                connect=self.config.connect_timeout,
            ),
            headers={
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            },
            follow_redirects=True,
        )
        logger.debug(
            "TheMealDBClient HTTP client created",
            base_url=self.base_url,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
        )
        return client

    @property
    def base_url(self) -> str:
        """Endpoint base URL, e.g. ``https://www.themealdb.com/api/json/v1/1/``."""
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client:
            self._http.close()
            logger.debug("TheMealDBClient shutdown")

    def __enter__(self) -> TheMealDBClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # Complete meals
    # =========================================================================

    def search_by_name(self, keyword: str) -> list[Meal]:
        """Search meals by name: ``search.php?s=<keyword>``."""
        data = self._request(SEARCH_ENDPOINT, {"s": keyword})
        return self._map_full(MealsEnvelope.model_validate(data).rows)

    def list_by_first_letter(self, letter: str) -> list[Meal]:
        """List meals by first letter: ``search.php?f=<letter>``.

        Only the first character of the trimmed input is sent.
        """
        data = self._request(SEARCH_ENDPOINT, {"f": letter.strip()[:1]})
        return self._map_full(MealsEnvelope.model_validate(data).rows)

    def lookup_by_id(self, meal_id: int) -> Meal | None:
        """Look up a meal's full details: ``lookup.php?i=<id>``.

        Returns:
            The complete meal, or None if the id is unknown.

        Raises:
            MealDBRequestError: If every attempt fails.
            MealValidationError: If the returned row is not a valid meal.
        """
        data = self._request(LOOKUP_ENDPOINT, {"i": str(meal_id)})
        rows = MealsEnvelope.model_validate(data).rows
        if not rows:
            logger.debug("Meal not found", meal_id=meal_id)
            return None
        return Meal.from_full_row(rows[0], loader=self)

    def load_meal(self, meal_id: int) -> Meal | None:
        """``MealLoader`` implementation, backed by ``lookup_by_id``."""
        return self.lookup_by_id(meal_id)

    def random(self) -> Meal | None:
        """Fetch a single random meal: ``random.php``."""
        data = self._request(RANDOM_ENDPOINT)
        rows = MealsEnvelope.model_validate(data).rows
        if not rows:
            return None
        return Meal.from_full_row(rows[0], loader=self)

    # =========================================================================
    # Minimal meals
    # =========================================================================

    def filter_by_ingredient(self, ingredient: str) -> list[Meal]:
        """Filter by main ingredient: ``filter.php?i=<ingredient>``."""
        return self._filter({"i": ingredient})

    def filter_by_category(self, category: str) -> list[Meal]:
        """Filter by category: ``filter.php?c=<category>``."""
        return self._filter({"c": category})

    def filter_by_area(self, area: str) -> list[Meal]:
        """Filter by area: ``filter.php?a=<area>``."""
        return self._filter({"a": area})

    # =========================================================================
    # Raw listings
    # =========================================================================

    def categories(self) -> list[dict[str, Any]]:
        """List all meal categories with descriptions: ``categories.php``."""
        data = self._request(CATEGORIES_ENDPOINT)
        return CategoriesEnvelope.model_validate(data).rows

    def list_all(self, kind: ListKind | str = ListKind.CATEGORY) -> list[dict[str, Any]]:
        """List all categories, areas or ingredients: ``list.php?<c|a|i>=list``.

        Args:
            kind: "category", "area" or "ingredient" (case-insensitive).

        Returns:
            Raw rows, or an empty list for an unknown kind (no request made).
        """
        list_kind = ListKind.parse(kind)
        if list_kind is None:
            logger.debug("Unknown list kind", kind=str(kind))
            return []

        data = self._request(LIST_ENDPOINT, {list_kind.query_key: "list"})
        return MealsEnvelope.model_validate(data).rows

    # =========================================================================
    # Internal
    # =========================================================================

    def _filter(self, params: Mapping[str, str]) -> list[Meal]:
        data = self._request(FILTER_ENDPOINT, params)
        return [
            Meal.from_minimal_row(row, loader=self)
            for row in MealsEnvelope.model_validate(data).rows
        ]

    def _map_full(self, rows: list[dict[str, Any]]) -> list[Meal]:
        return [Meal.from_full_row(row, loader=self) for row in rows]

    def _request(
        self,
        endpoint: str,
        params: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """GET an endpoint and decode its JSON object, with retries.

        Args:
            endpoint: Endpoint file name relative to ``base_url``.
            params: Query parameters.

        Returns:
            Decoded JSON object.

        Raises:
            MealDBRequestError: If all ``max_retries + 1`` attempts fail.
        """
        url = self.base_url + endpoint.lstrip("/")
        attempts = self.config.max_retries + 1

        last_error: str | None = None
        last_exception: Exception | None = None

        for attempt in range(1, attempts + 1):
            last_exception = None
            try:
                response = self._http.get(url, params=params)
            except httpx.RequestError as e:
                last_exception = e
                last_error = f"{type(e).__name__}: {e}"
            else:
                if not response.is_success:
                    last_error = f"HTTP error: {response.status_code}"
                elif not response.content.strip():
                    last_error = "Empty response body"
                else:
                    try:
                        decoded = orjson.loads(response.content)
                    except orjson.JSONDecodeError as e:
                        last_exception = e
                        last_error = "Invalid JSON"
                    else:
                        if isinstance(decoded, dict):
                            return decoded
                        last_error = "Invalid JSON"

            logger.warning(
                "TheMealDB request attempt failed",
                url=url,
                attempt=attempt,
                max_attempts=attempts,
                error=last_error,
            )

            if attempt < attempts:
                delay = self.config.retry_backoff * attempt
                if delay > 0:
                    time.sleep(delay)

        raise MealDBRequestError(url, attempts, last_error) from last_exception
