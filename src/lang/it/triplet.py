"""
Triplet Formatter — Запись числа 0..999 одним словом

Итальянские числительные до тысячи пишутся слитно:
    123 → centoventitré
    181 → centottantuno
    200 → duecento

0 даёт пустую строку (тройка ничего не добавляет к фразе).
"""

from src.core.math.triplets import TRIPLET_MAX
from src.lang.it.elision import elide_tens, hundreds_word, unit_after_tens
from src.lang.it.vocabulary import TEENS, TENS, UNITS


def triplet_to_words(value: int) -> str:
    """
    Слово для тройки цифр.

    Args:
        value: Целое в диапазоне [0, 999]

    Returns:
        Слитное слово без пробелов ("" для 0)

    Raises:
        ValueError: Если value вне [0, 999]
    """
    if not 0 <= value <= TRIPLET_MAX:
        raise ValueError(f"Triplet value out of range [0, {TRIPLET_MAX}]: {value}")

    h = value // 100
    t = value // 10 % 10
    u = value % 10

    words = ""
    if h > 0:
        # "uno" перед сотней не пишется: cento, не unocento
        if h > 1:
            words += UNITS[h]
        words += hundreds_word(t)

    if t == 0 and u == 0:
        return words

    return words + _tens_and_units(t, u)


def _tens_and_units(t: int, u: int) -> str:
    """Запись 1..99 по цифрам десятков и единиц."""
    if t == 0:
        return UNITS[u]
    if t == 1:
        return TEENS[u]

    return elide_tens(TENS[t], u) + unit_after_tens(u)
