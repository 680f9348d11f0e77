"""Итальянская локаль: количественные, порядковые, годы, денежные суммы."""

from .config import ItalianConfig
from .language import ConversionKind, ConversionResult, Italian

__all__ = [
    "Italian",
    "ItalianConfig",
    "ConversionKind",
    "ConversionResult",
]
