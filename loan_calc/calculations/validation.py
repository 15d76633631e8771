"""
Input Validation

Every calculator checks its inputs up front and raises InvalidInputError
naming the offending field. Nothing is clamped or defaulted silently.
"""

import logging
import math

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a calculator input violates its constraint."""

    def __init__(self, field: str, constraint: str):
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field} must be {constraint}")

    def to_dict(self) -> dict:
        return {"field": self.field, "message": str(self)}


def _reject(field: str, constraint: str) -> None:
    logger.debug("Rejected input %s: must be %s", field, constraint)
    raise InvalidInputError(field, constraint)


def require_finite(field: str, value: float) -> float:
    """Reject None, NaN and infinite values."""
    if value is None or isinstance(value, bool):
        _reject(field, "a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        _reject(field, "a number")
    if math.isnan(number) or math.isinf(number):
        _reject(field, "a finite number")
    return number


def require_positive(field: str, value: float) -> float:
    number = require_finite(field, value)
    if number <= 0:
        _reject(field, "> 0")
    return number


def require_non_negative(field: str, value: float) -> float:
    number = require_finite(field, value)
    if number < 0:
        _reject(field, ">= 0")
    return number


def require_percent(field: str, value: float) -> float:
    """Percent in the closed range [0, 100]."""
    number = require_finite(field, value)
    if number < 0 or number > 100:
        _reject(field, "between 0 and 100")
    return number


def require_whole(field: str, value, minimum: int = 1) -> int:
    """Whole number no smaller than ``minimum``."""
    number = require_finite(field, value)
    if number != int(number):
        _reject(field, "a whole number")
    if number < minimum:
        _reject(field, f">= {minimum}" if minimum != 1 else "> 0")
    return int(number)
