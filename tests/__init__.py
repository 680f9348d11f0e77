"""
Test suite for the Italian number-to-words locale

Contains:
- tests/unit/          : Unit tests for individual modules
"""
