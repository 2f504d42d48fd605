"""
Clock and time-unit helpers. Every JUR timestamp is an integer number of microseconds.
"""

import math
import time
from fractions import Fraction
from typing import Union

from jur.errors import UnsupportedUnitError
from jur.models.envelope import TimeUnit

UnitLike = Union[TimeUnit, str]


def now_microseconds() -> int:
    return time.time_ns() // 1_000


def normalize_unit(unit: UnitLike) -> TimeUnit:
    """Resolve a unit name case-insensitively, or raise UnsupportedUnitError."""
    if isinstance(unit, TimeUnit):
        return unit
    if not isinstance(unit, str):
        raise UnsupportedUnitError(unit)
    try:
        return TimeUnit(unit.lower())
    except ValueError:
        raise UnsupportedUnitError(unit) from None


def convert(microseconds: Union[int, float], unit: TimeUnit) -> int:
    """Scale a microsecond value to `unit`, rounding to the nearest integer (halves away from zero)."""
    value = Fraction(microseconds) / unit.divisor
    rounded = math.floor(abs(value) + Fraction(1, 2))
    return rounded if value >= 0 else -rounded
