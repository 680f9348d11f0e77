"""Конфигурация итальянской локали."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ItalianConfig:
    """Конфигурация Italian.

    Значения по умолчанию воспроизводят классическое поведение
    ("uno euro", "a.C." для лет до нашей эры).
    """

    # "uno" → "un" перед названием валюты ("un euro")
    apocope_before_currency: bool = False

    # Суффикс для отрицательных лет
    year_bc_suffix: str = "a.C."

    # Разрядность беззнакового целого для порядковых
    ordinal_max_bits: int = 64  # primo, secondo, ...
    ordinal_num_max_bits: int = 128  # 1°, 2°, ...
