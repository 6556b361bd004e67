"""Client library for the TheMealDB recipe API.

Meals from filter endpoints are minimal and complete themselves on first
access to a full field; see ``mealdb.models.meal``.

Log records from this package are disabled until the application calls
``setup_logging`` or ``configure_logging``.
"""

from loguru import logger

from mealdb.models import (
    IngredientImages,
    IngredientLine,
    Meal,
    MealLoader,
    MealState,
    ThumbnailSize,
)
from mealdb.clients.themealdb import ListKind, TheMealDBClient
from mealdb.core.config import MealDBSettings, Settings, get_settings
from mealdb.core.exceptions import (
    HydrationFailedError,
    MealDBError,
    MealDBRequestError,
    MealHydrationError,
    MealValidationError,
    NoLoaderError,
)
from mealdb.observability.logging import configure_logging, setup_logging


logger.disable("mealdb")


__version__ = "0.1.0"

__all__ = [
    "HydrationFailedError",
    "IngredientImages",
    "IngredientLine",
    "ListKind",
    "Meal",
    "MealDBError",
    "MealDBRequestError",
    "MealDBSettings",
    "MealHydrationError",
    "MealLoader",
    "MealState",
    "MealValidationError",
    "NoLoaderError",
    "Settings",
    "ThumbnailSize",
    "TheMealDBClient",
    "configure_logging",
    "get_settings",
    "setup_logging",
]
