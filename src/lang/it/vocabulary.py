"""
Vocabulary — Словарь итальянских числительных

Все таблицы индексируются цифрой 0..9 (tuple из 10 элементов).
Порядки по длинной шкале (long scale): 10^6 milione, 10^9 miliardo,
10^12 bilione, 10^15 biliardo, 10^18 trilione.
"""

from typing import Final, NamedTuple

# =============================================================================
# DIGIT TABLES
# =============================================================================

# Единицы внутри составного слова: 0 не произносится
UNITS: Final[tuple[str, ...]] = (
    "", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove",
)

# 10..19, индекс = цифра единиц
TEENS: Final[tuple[str, ...]] = (
    "dieci", "undici", "dodici", "tredici", "quattordici",
    "quindici", "sedici", "diciassette", "diciotto", "diciannove",
)

# Десятки 20..90, индексы 0 и 1 не используются
TENS: Final[tuple[str, ...]] = (
    "", "", "venti", "trenta", "quaranta",
    "cinquanta", "sessanta", "settanta", "ottanta", "novanta",
)

# Цифры дробной части читаются по одной, ноль произносится
DIGIT_WORDS: Final[tuple[str, ...]] = (
    "zero", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove",
)


# =============================================================================
# WORDS
# =============================================================================

ZERO_WORD: Final[str] = "zero"
MINUS_WORD: Final[str] = "meno"
INFINITY_WORD: Final[str] = "infinito"
DECIMAL_SEPARATOR_WORD: Final[str] = "virgola"

HUNDRED_WORD: Final[str] = "cento"
THOUSAND_SINGULAR: Final[str] = "mille"
THOUSAND_SUFFIX: Final[str] = "mila"

# "tre" после десятков пишется с ударением: ventitré
ACCENTED_THREE: Final[str] = "tré"
PLAIN_THREE: Final[str] = "tre"

# Десятки, чья гласная выпадает перед ними (cent + ottanta)
TENS_ELIDING_HUNDRED: Final[frozenset[int]] = frozenset({8})

# Единицы, перед которыми выпадает гласная десятков (vent + uno, vent + otto)
UNITS_ELIDING_TENS: Final[frozenset[int]] = frozenset({1, 8})

# Единица, которая после десятков получает ударение
ACCENTED_UNIT: Final[int] = 3


# =============================================================================
# SCALES (long scale)
# =============================================================================


class ScaleName(NamedTuple):
    """Название порядка 1000^index"""

    singular: str  # Фиксированная фраза для ровно одной единицы порядка
    plural: str


SCALES: Final[dict[int, ScaleName]] = {
    2: ScaleName("un milione", "milioni"),
    3: ScaleName("un miliardo", "miliardi"),
    4: ScaleName("un bilione", "bilioni"),
    5: ScaleName("un biliardo", "biliardi"),
    6: ScaleName("un trilione", "trilioni"),
}

# Первый индекс, для которого используется таблица SCALES
FIRST_SCALE_INDEX: Final[int] = 2


# =============================================================================
# ORDINALS
# =============================================================================

# Нерегулярные порядковые 1..10
IRREGULAR_ORDINALS: Final[dict[int, str]] = {
    1: "primo",
    2: "secondo",
    3: "terzo",
    4: "quarto",
    5: "quinto",
    6: "sesto",
    7: "settimo",
    8: "ottavo",
    9: "nono",
    10: "decimo",
}

ORDINAL_SUFFIX: Final[str] = "esimo"
ORDINAL_NUM_MARK: Final[str] = "°"

# Гласные (включая ударные), отбрасываемые перед суффиксом -esimo
VOWELS: Final[str] = "aeiouàèéìòù"
