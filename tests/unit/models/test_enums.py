"""Unit tests for model enums."""

from __future__ import annotations

import pytest

from mealdb.models import MealState, ThumbnailSize


pytestmark = pytest.mark.unit


class TestThumbnailSizeParse:
    """Tests for ThumbnailSize.parse."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("small", ThumbnailSize.SMALL),
            (" SMALL ", ThumbnailSize.SMALL),
            ("Large", ThumbnailSize.LARGE),
            ("medium", ThumbnailSize.MEDIUM),
            ("", ThumbnailSize.MEDIUM),
            ("xyz", ThumbnailSize.MEDIUM),
            (None, ThumbnailSize.MEDIUM),
            (ThumbnailSize.LARGE, ThumbnailSize.LARGE),
        ],
    )
    def test_resolves_tokens(self, token: str | None, expected: ThumbnailSize) -> None:
        assert ThumbnailSize.parse(token) is expected


def test_meal_state_values() -> None:
    assert MealState.MINIMAL == "minimal"
    assert MealState.COMPLETE == "complete"
