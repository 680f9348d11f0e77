"""
Cardinal Composer — Количественные числительные

Собирает фразу из троек:
- index >= 2: отдельные слова через пробел ("due milioni", "un miliardo")
- index 1 и 0: одно слитное слово ("centoventitremilaquattrocentocinquantasei")

Знак "meno" выводится один раз на верхнем уровне, дальше обрабатывается
абсолютное значение. Дробная часть читается по цифрам:
    3.14 → "tre virgola uno quattro"

ПРАВИЛА:
1. Ноль → "zero" (независимо от знака)
2. ±Infinity → "infinito" / "meno infinito"
3. Нулевые тройки пропускаются
4. 1000 → "mille", N*1000 → "<N>mila" (tré → tre перед mila)
5. >= 10^21 → CannotConvertError
"""

from typing import Final

from src.core.domain.errors import REASON_SCALE_INDEX_UNSUPPORTED, CannotConvertError
from src.core.domain.magnitude import Magnitude
from src.core.math.triplets import TRIPLET_BASE, split_thousands
from src.lang.it.elision import deaccent_before_mila
from src.lang.it.scales import scale_to_words
from src.lang.it.triplet import triplet_to_words
from src.lang.it.vocabulary import (
    DECIMAL_SEPARATOR_WORD,
    DIGIT_WORDS,
    FIRST_SCALE_INDEX,
    INFINITY_WORD,
    MINUS_WORD,
    SCALES,
    THOUSAND_SINGULAR,
    THOUSAND_SUFFIX,
    ZERO_WORD,
)


# =============================================================================
# LIMITS
# =============================================================================

# Первая степень 10 без названия порядка (10^21)
CARDINAL_LIMIT_EXPONENT: Final[int] = 3 * (max(SCALES) + 1)
CARDINAL_LIMIT: Final[int] = TRIPLET_BASE ** (max(SCALES) + 1)


def _unsupported_magnitude() -> CannotConvertError:
    return CannotConvertError(
        REASON_SCALE_INDEX_UNSUPPORTED,
        f"Values >= 10^{CARDINAL_LIMIT_EXPONENT} have no scale name",
    )


def ensure_spellable(magnitude: Magnitude) -> None:
    """
    Проверка |value| < 10^21 до извлечения целой части.

    Сравнение идёт по Decimal, поэтому "1e300000" отклоняется
    без построения целого из 300000 цифр.

    Raises:
        CannotConvertError: Если |value| >= 10^21 (в том числе бесконечность)
    """
    if magnitude.value.copy_abs() >= CARDINAL_LIMIT:
        raise _unsupported_magnitude()


# =============================================================================
# INTEGRAL PART
# =============================================================================


def thousands_to_words(value: int) -> str:
    """
    Тройка на позиции тысяч.

    Examples:
        >>> thousands_to_words(1)
        'mille'
        >>> thousands_to_words(23)
        'ventitremila'
    """
    if value == 1:
        return THOUSAND_SINGULAR
    return deaccent_before_mila(triplet_to_words(value)) + THOUSAND_SUFFIX


def integer_to_words(n: int) -> str:
    """
    Количественное числительное для целого.

    Args:
        n: Целое произвольной длины (знак допускается)

    Returns:
        Фраза ("zero" для 0, "meno ..." для отрицательных)

    Raises:
        CannotConvertError: Если |n| >= 10^21
    """
    if n == 0:
        return ZERO_WORD
    if n < 0:
        return f"{MINUS_WORD} {integer_to_words(-n)}"
    if n >= CARDINAL_LIMIT:
        raise _unsupported_magnitude()

    high_parts: list[str] = []
    low_part = ""

    for index, value in reversed(split_thousands(n)):
        if value == 0:
            continue

        if index >= FIRST_SCALE_INDEX:
            high_parts.append(scale_to_words(value, index))
        elif index == 1:
            low_part += thousands_to_words(value)
        else:
            low_part += triplet_to_words(value)

    if low_part:
        high_parts.append(low_part)

    return " ".join(high_parts)


# =============================================================================
# FRACTIONAL PART
# =============================================================================


def fraction_to_words(digits: tuple[int, ...]) -> list[str]:
    """
    Дробные цифры по одной ("zero" произносится).

    Raises:
        ValueError: Если цифра вне 0..9
    """
    words = []
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"Digit out of range [0, 9]: {digit}")
        words.append(DIGIT_WORDS[digit])
    return words


# =============================================================================
# CARDINAL
# =============================================================================


def cardinal_words(magnitude: Magnitude) -> str:
    """
    Количественное числительное для произвольного Magnitude.

    Args:
        magnitude: Число (в том числе дробное или бесконечное)

    Returns:
        Фраза на итальянском

    Raises:
        CannotConvertError: Если |integral| >= 10^21

    Examples:
        >>> cardinal_words(Magnitude.of(-1.5))
        'meno uno virgola cinque'
    """
    if magnitude.is_infinite():
        if magnitude.is_negative():
            return f"{MINUS_WORD} {INFINITY_WORD}"
        return INFINITY_WORD

    if magnitude.is_zero():
        return ZERO_WORD

    if magnitude.is_negative():
        return f"{MINUS_WORD} {cardinal_words(magnitude.absolute())}"

    ensure_spellable(magnitude)
    fraction = magnitude.fractional_digits()
    integral = magnitude.integral()
    if not fraction:
        return integer_to_words(integral)

    words: list[str] = []
    # Нулевая целая часть не произносится: 0.5 → "virgola cinque"
    if integral != 0:
        words.append(integer_to_words(integral))
    words.append(DECIMAL_SEPARATOR_WORD)
    words.extend(fraction_to_words(fraction))

    return " ".join(words)
