"""Italian — итальянская локаль number-to-words

Точки входа для слоя выбора языка:
- to_cardinal:    123 → "centoventitré"
- to_ordinal:     21 → "ventunesimo"
- to_ordinal_num: 21 → "21°"
- to_year:        -44 → "quarantaquattro a.C."
- to_currency:    1.50 EUR → "uno euro e cinquanta centesimi"

Методы to_* бросают CannotConvertError. convert() возвращает
ConversionResult и никогда не бросает CannotConvertError.

Все операции чистые: объект хранит только frozen-конфигурацию,
вызовы из разных потоков не требуют синхронизации.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from src.core.domain.currency import Currency
from src.core.domain.errors import CannotConvertError
from src.core.domain.magnitude import Magnitude
from src.lang.it.cardinal import cardinal_words
from src.lang.it.config import ItalianConfig
from src.lang.it.currency import currency_words
from src.lang.it.ordinal import ordinal_numeral, ordinal_words

logger = logging.getLogger(__name__)

Number = Magnitude | Decimal | int | float | str


# =============================================================================
# ENUMS
# =============================================================================


class ConversionKind(str, Enum):
    """Регистр вывода"""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    ORDINAL_NUM = "ordinal_num"
    YEAR = "year"
    CURRENCY = "currency"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат конвертации."""

    success: bool
    kind: ConversionKind

    # Пусто при неудаче (частичный вывод не возвращается)
    words: str

    # Код причины CannotConvertError, пусто при успехе
    error_reason: str

    details: str


# =============================================================================
# LOCALE
# =============================================================================


class Italian:
    """Итальянская локаль.

    Все регистры сводятся к количественному числительному
    (cardinal_words / integer_to_words).
    """

    def __init__(self, config: Optional[ItalianConfig] = None) -> None:
        self.config = config or ItalianConfig()

    def to_cardinal(self, number: Number) -> str:
        return cardinal_words(Magnitude.of(number))

    def to_ordinal(self, number: Number) -> str:
        return ordinal_words(Magnitude.of(number), self.config.ordinal_max_bits)

    def to_ordinal_num(self, number: Number) -> str:
        return ordinal_numeral(Magnitude.of(number), self.config.ordinal_num_max_bits)

    def to_year(self, number: Number) -> str:
        """Год: отрицательные годы с суффиксом "a.C." от абсолютного значения."""
        magnitude = Magnitude.of(number)
        if magnitude.is_negative():
            return f"{cardinal_words(magnitude.absolute())} {self.config.year_bc_suffix}"
        return cardinal_words(magnitude)

    def to_currency(self, number: Number, currency: Currency) -> str:
        return currency_words(
            Magnitude.of(number),
            currency,
            apocope=self.config.apocope_before_currency,
        )

    def convert(
        self,
        number: Number,
        kind: ConversionKind = ConversionKind.CARDINAL,
        currency: Optional[Currency] = None,
    ) -> ConversionResult:
        """Конвертация в выбранный регистр с типизированным результатом.

        Args:
            number: Число (int, float, str, Decimal или Magnitude)
            kind: Регистр вывода
            currency: Код валюты (обязателен для CURRENCY)

        Returns:
            ConversionResult; success=False при CannotConvertError

        Raises:
            ValueError: Если для CURRENCY не передан currency
            pydantic.ValidationError: Если number не является числом
        """
        if kind == ConversionKind.CURRENCY and currency is None:
            raise ValueError("currency is required for currency conversion")

        magnitude = Magnitude.of(number)

        try:
            if kind == ConversionKind.CARDINAL:
                words = self.to_cardinal(magnitude)
            elif kind == ConversionKind.ORDINAL:
                words = self.to_ordinal(magnitude)
            elif kind == ConversionKind.ORDINAL_NUM:
                words = self.to_ordinal_num(magnitude)
            elif kind == ConversionKind.YEAR:
                words = self.to_year(magnitude)
            else:
                words = self.to_currency(magnitude, currency)
        except CannotConvertError as e:
            logger.debug("Cannot convert %s to %s: %s", magnitude.value, kind.value, e)
            return ConversionResult(
                success=False,
                kind=kind,
                words="",
                error_reason=e.reason,
                details=str(e),
            )

        return ConversionResult(
            success=True,
            kind=kind,
            words=words,
            error_reason="",
            details=f"{kind.value}: {magnitude.value}",
        )
