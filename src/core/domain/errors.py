"""
Errors — Таксономия ошибок конвертации

Единственная доменная ошибка "cannot convert": число существует, но
не может быть записано словами в выбранном регистре.

Причины (reason):
- scale_index_unsupported: порядок >= 10^21 (нет названия для тройки)
- bounded_int_overflow: значение не помещается в беззнаковое целое N бит
- negative_not_allowed: отрицательное значение там, где нужен uint
- non_integral_not_allowed: дробное значение там, где нужен uint
- infinite_not_allowed: бесконечность там, где нужно конечное число

Нарушения контракта вызывающей стороны (цифра вне 0..9, тройка вне 0..999)
НЕ являются CannotConvertError, это ValueError.
"""

from typing import Final

# =============================================================================
# REASON CODES
# =============================================================================

REASON_SCALE_INDEX_UNSUPPORTED: Final[str] = "scale_index_unsupported"
REASON_BOUNDED_INT_OVERFLOW: Final[str] = "bounded_int_overflow"
REASON_NEGATIVE_NOT_ALLOWED: Final[str] = "negative_not_allowed"
REASON_NON_INTEGRAL_NOT_ALLOWED: Final[str] = "non_integral_not_allowed"
REASON_INFINITE_NOT_ALLOWED: Final[str] = "infinite_not_allowed"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Num2WordsError(Exception):
    """Базовая ошибка библиотеки."""
    pass


class CannotConvertError(Num2WordsError):
    """
    Число не может быть записано словами.

    Детерминированная ошибка: повторный вызов с тем же входом
    всегда завершится той же ошибкой. Частичный результат не возвращается.

    Attributes:
        reason: Машиночитаемый код причины (REASON_*)
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(f"{message} ({reason})")
        self.reason = reason
