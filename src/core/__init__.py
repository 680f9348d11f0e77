"""
Core domain models and numeric primitives.

Language-independent building blocks: the Magnitude value type, the Currency
code set, the conversion error taxonomy and base-1000 segmentation.
"""
