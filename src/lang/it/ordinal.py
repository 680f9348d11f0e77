"""
Ordinal Transformer — Порядковые числительные

1..10: нерегулярная таблица (primo .. decimo).
Остальные: суффиксация всей количественной фразы:
    cardinal без финальной гласной + "esimo"
    11 → undicesimo, 21 → ventunesimo, 1000 → millesimo

Значение должно точно помещаться в беззнаковое целое (u64 по умолчанию).
"""

from src.core.domain.magnitude import Magnitude
from src.lang.it.cardinal import integer_to_words
from src.lang.it.elision import drop_final_vowel
from src.lang.it.vocabulary import IRREGULAR_ORDINALS, ORDINAL_NUM_MARK, ORDINAL_SUFFIX


def ordinal_words(magnitude: Magnitude, max_bits: int = 64) -> str:
    """
    Порядковое числительное.

    Args:
        magnitude: Неотрицательное целое
        max_bits: Разрядность, в которую значение обязано помещаться

    Returns:
        "primo", "ventunesimo", ...

    Raises:
        CannotConvertError: Отрицательное, дробное, бесконечное
            или не помещающееся в max_bits значение
    """
    n = magnitude.to_bounded_uint(max_bits)

    irregular = IRREGULAR_ORDINALS.get(n)
    if irregular is not None:
        return irregular

    return drop_final_vowel(integer_to_words(n)) + ORDINAL_SUFFIX


def ordinal_numeral(magnitude: Magnitude, max_bits: int = 128) -> str:
    """
    Порядковое число цифрами: 5 → "5°".

    Raises:
        CannotConvertError: Если значение не помещается в u{max_bits}
    """
    return f"{magnitude.to_bounded_uint(max_bits)}{ORDINAL_NUM_MARK}"
