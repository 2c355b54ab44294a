"""
validators.py – Input normalisation applied before values reach the
calculation functions.

* City names are trimmed and case-folded for matching only; the caller keeps
  the verbatim spelling for display.
* Distances typed by a user may carry pt-BR separators ("1.234,5") and are
  parsed into a non-negative float, or rejected with InvalidInputError.
"""
from __future__ import annotations

import math
import re
from typing import Any

from co2calc.errors import InvalidInputError


# ─────────────────────────────────────────────────────────────
# Cities
# ─────────────────────────────────────────────────────────────

def normalise_city(name: Any) -> str:
    """Return the matching key for a city name ('' for None / blank)."""
    if name is None:
        return ""
    return str(name).strip().casefold()


# ─────────────────────────────────────────────────────────────
# Numbers
# ─────────────────────────────────────────────────────────────

def require_non_negative(value: Any, name: str = "value") -> float:
    """
    Return *value* as a float if it is a finite, non-negative real number.

    Strings are not accepted here: raw user input goes through
    ``parse_distance`` first.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    if number < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value!r}")
    return number


def _clean_numeric_text(text: str) -> str:
    """
    Turn '1.234,5', '1,234.5', '430,5' or '430.5' into a float literal.

    When both separators appear the right-most one is the decimal mark.
    A lone comma is always the decimal mark (pt-BR input).
    """
    cleaned = re.sub(r"[\s_]|km$", "", text.strip().lower())
    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(",", ".")
    return cleaned


def parse_distance(value: Any) -> float:
    """
    Parse a manually entered distance in kilometres.

    Accepts ints, floats and numeric strings.  Raises InvalidInputError for
    blank, non-numeric, negative, NaN or infinite input.
    """
    if value is None:
        raise InvalidInputError("Distance is required")
    if isinstance(value, str):
        if not value.strip():
            raise InvalidInputError("Distance is required")
        try:
            value = float(_clean_numeric_text(value))
        except ValueError:
            raise InvalidInputError(f"Distance is not a number: {value!r}") from None
    return require_non_negative(value, "distance_km")
