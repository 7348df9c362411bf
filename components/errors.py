# components/errors.py
from __future__ import annotations

from typing import Any


class GaugeError(Exception):
    """Base class for gauge failures."""


class ConfigurationError(GaugeError, ValueError):
    """
    Raised when a configuration value is rejected.
    The previous value is kept.
    """

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(f"Invalid value for '{field}': {value!r} ({reason})")
        self.field = field
        self.value = value
        self.reason = reason


class DegenerateGeometryError(GaugeError, ArithmeticError):
    """Zero-length vector where a direction is needed."""


class ZeroExtentError(GaugeError, ArithmeticError):
    """Canvas (or logical) size is zero or negative."""
