"""
Magnitude — Знаковое десятичное число произвольной точности

Immutable Pydantic модель поверх decimal.Decimal. Все операции точные:
никакая операция не проходит через контекст Decimal (precision=28),
поэтому значения любой длины не округляются.

Поддерживает:
- Проверки знака, нуля, бесконечности
- Целую часть (Python int, усечение к нулю)
- Дробные цифры (от старшей к младшей, без хвостовых нулей)
- Минорные единицы: trunc(|value| * 100) mod 100
- Извлечение беззнакового целого ограниченной разрядности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не попадает в модель (ValidationError)
2. float читается через repr: 1.50 → Decimal("1.5"), не двоичное разложение
3. -0 считается нулём и не считается отрицательным
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.errors import (
    REASON_BOUNDED_INT_OVERFLOW,
    REASON_INFINITE_NOT_ALLOWED,
    REASON_NEGATIVE_NOT_ALLOWED,
    REASON_NON_INTEGRAL_NOT_ALLOWED,
    CannotConvertError,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Количество дробных цифр, образующих минорную единицу (центы)
MINOR_UNIT_DIGITS: Final[int] = 2

# Разрядность по умолчанию для to_bounded_uint
DEFAULT_UINT_BITS: Final[int] = 64


# =============================================================================
# MAGNITUDE MODEL
# =============================================================================


class Magnitude(BaseModel):
    """
    Число для конвертации в слова.

    Принимает int, float, str, Decimal. bool и NaN отклоняются.
    ±Infinity допускается (кардинальная форма "infinito").
    """

    value: Decimal = Field(..., allow_inf_nan=True, description="Исходное число")

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> Any:
        """Приведение входа к Decimal без потери точности"""
        if isinstance(v, bool):
            raise ValueError(f"bool is not a number: {v!r}")
        if isinstance(v, float):
            return Decimal(repr(v))
        if isinstance(v, int):
            return Decimal(v)
        if isinstance(v, str):
            try:
                return Decimal(v.strip())
            except InvalidOperation:
                raise ValueError(f"Not a decimal number: {v!r}")
        return v

    @field_validator("value")
    @classmethod
    def reject_nan(cls, v: Decimal) -> Decimal:
        """NaN не имеет словесной записи"""
        if v.is_nan():
            raise ValueError("NaN cannot be converted to words")
        return v

    @classmethod
    def of(cls, number: "Magnitude | Decimal | int | float | str") -> "Magnitude":
        """
        Нормализация входа вызывающей стороны.

        Args:
            number: Magnitude (возвращается как есть) или исходное число

        Returns:
            Magnitude
        """
        if isinstance(number, Magnitude):
            return number
        return cls(value=number)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_negative(self) -> bool:
        """Строго меньше нуля (-0 не отрицателен)"""
        return self.value < 0

    def is_zero(self) -> bool:
        return self.value == 0

    def is_infinite(self) -> bool:
        return self.value.is_infinite()

    def is_integral(self) -> bool:
        """Конечное число без ненулевых дробных цифр"""
        return not self.is_infinite() and not self.fractional_digits()

    # -------------------------------------------------------------------------
    # Exact arithmetic
    # -------------------------------------------------------------------------

    def negated(self) -> "Magnitude":
        # copy_negate не округляет по контексту, в отличие от унарного минуса
        return Magnitude(value=self.value.copy_negate())

    def absolute(self) -> "Magnitude":
        return Magnitude(value=self.value.copy_abs())

    def integral(self) -> int:
        """
        Целая часть, усечение к нулю.

        Returns:
            int произвольной длины (-1.5 → -1)

        Raises:
            CannotConvertError: Для бесконечности
        """
        if self.is_infinite():
            raise CannotConvertError(
                REASON_INFINITE_NOT_ALLOWED,
                f"Infinite value has no integral part: {self.value}",
            )
        return int(self.value)

    def fractional_digits(self) -> tuple[int, ...]:
        """
        Дробные цифры |value| от старшей к младшей, без хвостовых нулей.

        Examples:
            >>> Magnitude.of("3.140").fractional_digits()
            (1, 4)
            >>> Magnitude.of("0.05").fractional_digits()
            (0, 5)
            >>> Magnitude.of(7).fractional_digits()
            ()
        """
        if self.is_infinite():
            return ()

        _, digits, exponent = self.value.as_tuple()
        if exponent >= 0:
            return ()

        scale = -exponent
        if len(digits) >= scale:
            fraction = tuple(digits[-scale:])
        else:
            fraction = (0,) * (scale - len(digits)) + tuple(digits)

        end = len(fraction)
        while end > 0 and fraction[end - 1] == 0:
            end -= 1
        return fraction[:end]

    def minor_units(self) -> int:
        """
        Минорные единицы (центы): trunc(|value| * 100) mod 100.

        Examples:
            >>> Magnitude.of(1.5).minor_units()
            50
            >>> Magnitude.of("2.999").minor_units()
            99
        """
        padded = self.fractional_digits() + (0,) * MINOR_UNIT_DIGITS
        result = 0
        for digit in padded[:MINOR_UNIT_DIGITS]:
            result = result * 10 + digit
        return result

    def to_bounded_uint(self, bits: int = DEFAULT_UINT_BITS) -> int:
        """
        Точное извлечение беззнакового целого разрядности bits.

        Args:
            bits: Разрядность (64 для порядковых, 128 для "N°")

        Returns:
            int в диапазоне [0, 2^bits)

        Raises:
            CannotConvertError: Если значение бесконечно, отрицательно,
                дробно или >= 2^bits
        """
        if self.is_infinite():
            raise CannotConvertError(
                REASON_INFINITE_NOT_ALLOWED,
                f"Infinite value does not fit u{bits}",
            )
        if self.is_negative():
            raise CannotConvertError(
                REASON_NEGATIVE_NOT_ALLOWED,
                f"Negative value {self.value} does not fit u{bits}",
            )
        if not self.is_integral():
            raise CannotConvertError(
                REASON_NON_INTEGRAL_NOT_ALLOWED,
                f"Non-integral value {self.value} does not fit u{bits}",
            )

        # Сравнение до int(): огромный показатель не разворачивается в цифры
        if self.value >= 1 << bits:
            raise CannotConvertError(
                REASON_BOUNDED_INT_OVERFLOW,
                f"Value {self.value} does not fit u{bits}",
            )
        return self.integral()
