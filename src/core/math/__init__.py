"""
Core math modules

Позиционное разложение целых по основанию 1000.
"""

from src.core.math.triplets import (
    TRIPLET_BASE,
    TRIPLET_MAX,
    Triplet,
    split_thousands,
)

__all__ = [
    "TRIPLET_BASE",
    "TRIPLET_MAX",
    "Triplet",
    "split_thousands",
]
