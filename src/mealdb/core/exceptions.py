"""Exceptions raised by the TheMealDB client library.

Construction errors, hydration errors and request errors share the
``MealDBError`` base so callers can catch everything from this package
with a single ``except`` clause.
"""

from __future__ import annotations

from typing import Any


class MealDBError(Exception):
    """Base exception for all mealdb errors."""


class MealValidationError(MealDBError):
    """Raised when a row cannot produce a valid meal.

    A meal needs a positive ``idMeal`` and a non-empty ``strMeal`` after
    normalization. No entity is created when either is missing.
    """

    def __init__(self, meal_id: Any, name: str, message: str | None = None) -> None:
        self.meal_id = meal_id
        self.name = name
        super().__init__(
            message or f"Invalid meal row: id={meal_id!r}, name={name!r}"
        )


class MealHydrationError(MealDBError):
    """Base exception for failures while completing a minimal meal."""

    def __init__(self, meal_id: int, message: str) -> None:
        self.meal_id = meal_id
        super().__init__(message)


class NoLoaderError(MealHydrationError):
    """Raised when a minimal meal has no loader to complete itself with.

    This is a programming error: minimal meals built outside of the client
    must be given a loader before full fields are read.
    """

    def __init__(self, meal_id: int) -> None:
        super().__init__(
            meal_id, f"Meal id={meal_id} is incomplete and has no loader bound"
        )


class HydrationFailedError(MealHydrationError):
    """Raised when the loader returns no usable complete meal.

    The meal stays minimal and none of its fields are modified.
    """

    def __init__(self, meal_id: int, reason: str) -> None:
        self.reason = reason
        super().__init__(meal_id, f"Lookup failed to complete meal id={meal_id}: {reason}")


class MealDBRequestError(MealDBError):
    """Raised when every attempt of a request to TheMealDB has failed.

    Covers transport errors, non-2xx responses, empty bodies and bodies
    that are not a JSON object.
    """

    def __init__(self, url: str, attempts: int, last_error: str | None) -> None:
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Request failed after {attempts} attempt(s): {url}. "
            f"Last error: {last_error}"
        )
