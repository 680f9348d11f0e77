"""
Currency Formatter — Денежные суммы

    <целая часть> <валюта> [e <центы> <минорная единица>]

    1    EUR → "uno euro"
    1.50 EUR → "uno euro e cinquanta centesimi"
    2    USD → "due dollari statunitensi"

Единственное число ровно при целой части == 1 (для -1 множественное),
для центов при 1.
Центы: trunc(|value| * 100) mod 100. Нулевые центы не выводятся.

Несклоняемые названия (euro, yen, rupia indonesiana, ...) хранятся
с одинаковыми singular/plural.
"""

from typing import Final, NamedTuple

from src.core.domain.currency import Currency
from src.core.domain.errors import REASON_INFINITE_NOT_ALLOWED, CannotConvertError
from src.core.domain.magnitude import Magnitude
from src.lang.it.cardinal import ensure_spellable, integer_to_words
from src.lang.it.elision import apocope_uno
from src.lang.it.vocabulary import MINUS_WORD


# =============================================================================
# TYPES
# =============================================================================


class UnitName(NamedTuple):
    """Название денежной единицы в двух числах"""

    singular: str
    plural: str


def _invariant(name: str) -> UnitName:
    return UnitName(name, name)


# =============================================================================
# CURRENCY NAMES
# =============================================================================

CURRENCY_NAMES: Final[dict[Currency, UnitName]] = {
    Currency.AED: _invariant("dirham"),
    Currency.ARS: UnitName("peso argentino", "pesos argentini"),
    Currency.AUD: UnitName("dollaro australiano", "dollari australiani"),
    Currency.BRL: UnitName("real brasiliano", "real brasiliani"),
    Currency.CAD: UnitName("dollaro canadese", "dollari canadesi"),
    Currency.CHF: UnitName("franco", "franchi"),
    Currency.CLP: UnitName("peso cileno", "pesos cileni"),
    Currency.CNY: _invariant("yuan"),
    Currency.COP: UnitName("peso colombiano", "pesos colombiani"),
    Currency.CRC: UnitName("colón costaricense", "colón costaricensi"),
    Currency.DINAR: _invariant("dinar"),
    Currency.DOLLAR: UnitName("dollaro", "dollari"),
    Currency.DZD: UnitName("dinaro algerino", "dinari algerini"),
    Currency.EUR: _invariant("euro"),
    Currency.GBP: UnitName("sterlina", "sterline"),
    Currency.HKD: UnitName("dollaro di Hong Kong", "dollari di Hong Kong"),
    Currency.IDR: _invariant("rupia indonesiana"),
    Currency.ILS: UnitName("nuovo siclo", "nuovi sicli"),
    Currency.INR: _invariant("rupia indiana"),
    Currency.JPY: _invariant("yen"),
    Currency.KRW: _invariant("won"),
    Currency.KWD: UnitName("dinaro kuwaitiano", "dinari kuwaitiani"),
    Currency.KZT: _invariant("tenge"),
    Currency.MXN: UnitName("peso messicano", "pesos messicani"),
    Currency.MYR: _invariant("ringgit"),
    Currency.NOK: UnitName("corona norvegese", "corone norvegesi"),
    Currency.NZD: UnitName("dollaro neozelandese", "dollari neozelandesi"),
    Currency.PEN: UnitName("sol peruviano", "sol peruviani"),
    Currency.PESO: UnitName("peso", "pesos"),
    Currency.PHP: UnitName("peso filippino", "pesos filippini"),
    Currency.PLN: _invariant("złoty"),
    Currency.QAR: UnitName("rial qatariota", "rial qatarioti"),
    Currency.RIYAL: _invariant("rial"),
    Currency.RUB: UnitName("rublo", "rubli"),
    Currency.SAR: UnitName("rial saudita", "rial sauditi"),
    Currency.SGD: UnitName("dollaro di Singapore", "dollari di Singapore"),
    Currency.THB: _invariant("baht"),
    Currency.TRY: UnitName("lira turca", "lire turche"),
    Currency.TWD: UnitName("dollaro taiwanese", "dollari taiwanesi"),
    Currency.UAH: UnitName("grivna", "grivne"),
    Currency.USD: UnitName("dollaro statunitense", "dollari statunitensi"),
    Currency.UYU: UnitName("peso uruguaiano", "pesos uruguaiani"),
    Currency.VND: _invariant("dong"),
    Currency.ZAR: _invariant("rand"),
}


# =============================================================================
# MINOR UNIT NAMES
# =============================================================================

DEFAULT_CENTS_NAME: Final[UnitName] = UnitName("centesimo", "centesimi")

_CENTAVO: Final[UnitName] = UnitName("centavo", "centavos")

CENTS_NAMES: Final[dict[Currency, UnitName]] = {
    Currency.AED: _invariant("fils"),
    Currency.KWD: _invariant("fils"),
    Currency.ARS: _CENTAVO,
    Currency.BRL: _CENTAVO,
    Currency.CLP: _CENTAVO,
    Currency.COP: _CENTAVO,
    Currency.MXN: _CENTAVO,
    Currency.UYU: _CENTAVO,
    Currency.IDR: _invariant("sen"),
    Currency.MYR: _invariant("sen"),
    Currency.KRW: _invariant("jeon"),
    Currency.SAR: UnitName("halala", "halalat"),
    Currency.THB: _invariant("satang"),
    Currency.UAH: UnitName("kopijka", "kopijky"),
    Currency.VND: _invariant("xu"),
}


# =============================================================================
# LOOKUPS
# =============================================================================


def currency_name(currency: Currency, plural: bool) -> str:
    name = CURRENCY_NAMES[currency]
    return name.plural if plural else name.singular


def cents_name(currency: Currency, plural: bool) -> str:
    """Минорная единица, по умолчанию centesimo/centesimi."""
    name = CENTS_NAMES.get(currency, DEFAULT_CENTS_NAME)
    return name.plural if plural else name.singular


# =============================================================================
# FORMATTER
# =============================================================================


def currency_words(
    magnitude: Magnitude,
    currency: Currency,
    apocope: bool = False,
) -> str:
    """
    Сумма прописью.

    Args:
        magnitude: Сумма (знак допускается)
        currency: Код валюты
        apocope: "uno" → "un" перед названием единицы ("un euro")

    Returns:
        "<целая часть> <валюта>[ e <центы> <минорная единица>]"

    Raises:
        CannotConvertError: Для бесконечной суммы или |сумма| >= 10^21
    """
    if magnitude.is_infinite():
        raise CannotConvertError(
            REASON_INFINITE_NOT_ALLOWED,
            f"Infinite amount cannot be spelled in {currency.value}",
        )
    ensure_spellable(magnitude)

    integral = magnitude.integral()
    cents = magnitude.minor_units()

    integral_words = integer_to_words(integral)
    if magnitude.is_negative() and integral == 0 and cents:
        # -0.50: знак несёт целая часть, иначе он теряется
        integral_words = f"{MINUS_WORD} {integral_words}"
    if apocope:
        integral_words = apocope_uno(integral_words)

    words = f"{integral_words} {currency_name(currency, integral != 1)}"

    if cents:
        cents_words = integer_to_words(cents)
        if apocope:
            cents_words = apocope_uno(cents_words)
        words += f" e {cents_words} {cents_name(currency, cents != 1)}"

    return words
