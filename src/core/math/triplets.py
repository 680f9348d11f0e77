"""
Triplets — Разбиение целого числа на группы по 1000

Позиционное разложение неотрицательного целого по основанию 1000:
    n = Σ value_i × 1000^i,  0 <= value_i <= 999

index 0: единицы/сотни, 1: тысячи, 2: миллионы, ...

Верхней границы длины разложения нет: отказ для слишком больших
индексов делает тот, кто называет порядки.
"""

from typing import Final, NamedTuple

# =============================================================================
# CONSTANTS
# =============================================================================

TRIPLET_BASE: Final[int] = 1000
TRIPLET_MAX: Final[int] = TRIPLET_BASE - 1


# =============================================================================
# TYPES
# =============================================================================


class Triplet(NamedTuple):
    """Тройка цифр с позиционным индексом"""

    index: int
    value: int


# =============================================================================
# SEGMENTATION
# =============================================================================


def split_thousands(n: int) -> list[Triplet]:
    """
    Разбиение на тройки от младшей к старшей.

    Args:
        n: Неотрицательное целое произвольной длины

    Returns:
        Список Triplet (index 0 первым). Для n == 0 пустой список,
        ноль обрабатывает вызывающая сторона.

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> split_thousands(123456)
        [Triplet(index=0, value=456), Triplet(index=1, value=123)]
        >>> split_thousands(0)
        []
    """
    if n < 0:
        raise ValueError(f"Cannot split negative value into triplets: {n}")

    triplets: list[Triplet] = []
    index = 0
    while n:
        n, value = divmod(n, TRIPLET_BASE)
        triplets.append(Triplet(index=index, value=value))
        index += 1

    return triplets
