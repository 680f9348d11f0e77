"""
Elision — Контекстные правки итальянских числительных

Каждое правило оформлено отдельной чистой функцией:
- cent + ottanta: "cento" теряет "o" перед десятками 80
- vent + uno / vent + otto: десятки теряют гласную перед 1 и 8
- ventitré: "tre" после десятков пишется с ударением
- ventitre + mila: ударение снимается перед "mila"
- undic + esimo: финальная гласная отбрасывается перед суффиксом
- un euro: "uno" → "un" (апокопа, опционально)

Правила применяются к строкам, а не к числам, поэтому порядок
применения задаёт вызывающая сторона.
"""

from src.lang.it.vocabulary import (
    ACCENTED_THREE,
    ACCENTED_UNIT,
    HUNDRED_WORD,
    PLAIN_THREE,
    TENS_ELIDING_HUNDRED,
    UNITS,
    UNITS_ELIDING_TENS,
    VOWELS,
)


def drop_final_vowel(word: str) -> str:
    """
    Отбросить финальную гласную (обычную или ударную), если она есть.

    Examples:
        >>> drop_final_vowel("ventuno")
        'ventun'
        >>> drop_final_vowel("ventitré")
        'ventitr'
        >>> drop_final_vowel("sei")
        'se'
    """
    if word and word[-1] in VOWELS:
        return word[:-1]
    return word


def hundreds_word(tens_digit: int) -> str:
    """
    "cento" или "cent" в зависимости от следующей цифры десятков.

    Examples:
        >>> hundreds_word(8)
        'cent'
        >>> hundreds_word(2)
        'cento'
    """
    if tens_digit in TENS_ELIDING_HUNDRED:
        return drop_final_vowel(HUNDRED_WORD)
    return HUNDRED_WORD


def elide_tens(tens_word: str, units_digit: int) -> str:
    """Десятки теряют гласную перед гласной единиц (venti → vent перед uno/otto)"""
    if units_digit in UNITS_ELIDING_TENS:
        return drop_final_vowel(tens_word)
    return tens_word


def unit_after_tens(units_digit: int) -> str:
    """Слово единиц после десятков: 3 → "tré", 0 → ""."""
    if units_digit == ACCENTED_UNIT:
        return ACCENTED_THREE
    return UNITS[units_digit]


def deaccent_before_mila(word: str) -> str:
    """
    Снять ударение с конечного "tré" перед "mila".

    Examples:
        >>> deaccent_before_mila("centoventitré")
        'centoventitre'
        >>> deaccent_before_mila("tre")
        'tre'
    """
    if word.endswith(ACCENTED_THREE):
        return word[: -len(ACCENTED_THREE)] + PLAIN_THREE
    return word


def apocope_uno(phrase: str) -> str:
    """
    Апокопа "uno" → "un" в конце фразы (перед существительным).

    Examples:
        >>> apocope_uno("ventuno")
        'ventun'
        >>> apocope_uno("due")
        'due'
    """
    if phrase.endswith(UNITS[1]):
        return phrase[:-1]
    return phrase
