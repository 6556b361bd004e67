"""Field normalization for loosely-typed TheMealDB rows.

TheMealDB returns every value as a string (or null), with empty strings
and stray whitespace for unset fields. These helpers coerce raw values
into the types the meal model stores.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any


# dateModified is usually "2015-09-16 10:34:21"
MODIFIED_FORMAT = "%Y-%m-%d %H:%M:%S"

# A word starts at any letter or digit not preceded by another one or an apostrophe
_WORD_START = re.compile(r"(?<![\w'’])\w")


def nullable_string(value: Any) -> str | None:
    """Return the trimmed string, or None when absent or blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def title_case(value: str) -> str:
    """Lowercase a string, then capitalize the first letter of each word.

    Examples:
        >>> title_case("chicken BREAST")
        'Chicken Breast'
        >>> title_case("shepherd's pie")
        "Shepherd's Pie"
    """
    text = value.strip().lower()
    if not text:
        return ""
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def nullable_title_case(value: Any) -> str | None:
    """Title-case a raw value, or None when absent or blank."""
    text = nullable_string(value)
    return None if text is None else title_case(text)


def parse_meal_id(value: Any) -> int:
    """Coerce a raw ``idMeal`` into an int.

    Integral floats and numeric strings such as ``"52874.0"`` are accepted.
    Returns 0 for anything else, so the caller's positivity check rejects it.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return parse_meal_id(float(text))
        except ValueError:
            return 0
    return 0


def parse_modified(value: Any) -> datetime | None:
    """Parse ``dateModified``, falling back to ISO 8601.

    Never raises: an unparseable timestamp becomes None.
    """
    text = nullable_string(value)
    if text is None:
        return None

    try:
        return datetime.strptime(text, MODIFIED_FORMAT)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
