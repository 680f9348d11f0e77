"""
Domain models and value objects.

Contains the Magnitude value type, the Currency enumeration and conversion errors.
"""

from src.core.domain.currency import Currency
from src.core.domain.errors import (
    REASON_BOUNDED_INT_OVERFLOW,
    REASON_INFINITE_NOT_ALLOWED,
    REASON_NEGATIVE_NOT_ALLOWED,
    REASON_NON_INTEGRAL_NOT_ALLOWED,
    REASON_SCALE_INDEX_UNSUPPORTED,
    CannotConvertError,
    Num2WordsError,
)
from src.core.domain.magnitude import (
    DEFAULT_UINT_BITS,
    MINOR_UNIT_DIGITS,
    Magnitude,
)

__all__ = [
    # Currency
    "Currency",
    # Errors
    "Num2WordsError",
    "CannotConvertError",
    "REASON_BOUNDED_INT_OVERFLOW",
    "REASON_INFINITE_NOT_ALLOWED",
    "REASON_NEGATIVE_NOT_ALLOWED",
    "REASON_NON_INTEGRAL_NOT_ALLOWED",
    "REASON_SCALE_INDEX_UNSUPPORTED",
    # Magnitude
    "Magnitude",
    "DEFAULT_UINT_BITS",
    "MINOR_UNIT_DIGITS",
]
