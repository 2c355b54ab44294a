"""
errors.py – Exceptions raised by the calculation core.

NotFound      → RouteNotFoundError  (recoverable: ask for a manual distance)
InvalidMode   → InvalidModeError    (mode outside the closed set)
InvalidInput  → InvalidInputError   (negative / malformed numbers, blank cities)
"""
from __future__ import annotations

from typing import Any


class CalculatorError(Exception):
    """Base class for every error raised by co2calc."""


class RouteNotFoundError(CalculatorError, LookupError):
    """No stored route connects *origin* and *destination* in either direction."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(f"Route not found: '{origin}' → '{destination}'")


class InvalidModeError(CalculatorError, ValueError):
    """Transport mode is not one of bicycle, car, bus, truck."""

    def __init__(self, mode: Any) -> None:
        self.mode = mode
        super().__init__(f"Unknown transport mode: {mode!r}")


class InvalidInputError(CalculatorError, ValueError):
    """A numeric or text input is outside the valid domain."""
