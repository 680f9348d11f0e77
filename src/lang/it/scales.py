"""
Scale Namer — Названия порядков от миллиона

index 2..6 (milione .. trilione). Ровно одна единица порядка: фиксированная
фраза ("un milione"), иначе слово тройки и множественное число
("due milioni"). Индексы вне таблицы дают CannotConvertError, молча
отбрасывать старшие тройки нельзя.
"""

from src.core.domain.errors import REASON_SCALE_INDEX_UNSUPPORTED, CannotConvertError
from src.lang.it.triplet import triplet_to_words
from src.lang.it.vocabulary import SCALES


def scale_to_words(value: int, index: int) -> str:
    """
    Фраза для тройки value на позиции index.

    Args:
        value: Тройка [1, 999]
        index: Позиционный индекс (2 = миллионы)

    Returns:
        "un milione", "ventitré miliardi", ...

    Raises:
        CannotConvertError: Если для index нет названия (>= 10^21)
    """
    scale = SCALES.get(index)
    if scale is None:
        raise CannotConvertError(
            REASON_SCALE_INDEX_UNSUPPORTED,
            f"No scale word for 1000^{index}",
        )

    if value == 1:
        return scale.singular
    return f"{triplet_to_words(value)} {scale.plural}"
