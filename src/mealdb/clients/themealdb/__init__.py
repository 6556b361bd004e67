"""TheMealDB API client package."""

from mealdb.clients.themealdb.client import TheMealDBClient
from mealdb.clients.themealdb.constants import ListKind
from mealdb.clients.themealdb.schemas import CategoriesEnvelope, MealsEnvelope


__all__ = [
    "CategoriesEnvelope",
    "ListKind",
    "MealsEnvelope",
    "TheMealDBClient",
]
