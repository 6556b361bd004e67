"""Shared test fixtures for the mealdb client tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from mealdb.clients.themealdb import TheMealDBClient
from mealdb.core.config import MealDBSettings
from mealdb.models import Meal
from tests.fixtures.mealdb_responses import create_full_row


@pytest.fixture
def api_settings() -> MealDBSettings:
    """Default API settings without retry sleeps."""
    return MealDBSettings(retry_backoff=0.0)


@pytest.fixture
def client(api_settings: MealDBSettings) -> Iterator[TheMealDBClient]:
    """TheMealDBClient owning its own httpx client."""
    client = TheMealDBClient(api_settings)
    yield client
    client.close()


@pytest.fixture
def full_row() -> dict[str, Any]:
    """Full row for meal 52874 with one ingredient."""
    return create_full_row()


@pytest.fixture
def complete_meal(full_row: dict[str, Any]) -> Meal:
    return Meal.from_full_row(full_row)
