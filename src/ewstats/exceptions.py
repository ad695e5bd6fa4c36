"""ewstats exceptions."""

from __future__ import annotations

from typing import Any


class EwstatsError(Exception):
    """Base exception for all ewstats errors."""


class InvalidArgument(EwstatsError, ValueError):
    """Raised when an accumulator or helper is given an out-of-range parameter."""

    def __init__(self, name: str, value: Any, requirement: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be {requirement}, got {value!r}")
