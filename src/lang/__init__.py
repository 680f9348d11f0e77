"""Локали number-to-words.

Каждая локаль это подпакет с классом, реализующим to_cardinal, to_ordinal,
to_ordinal_num, to_year, to_currency. Выбор локали делает вызывающая сторона.
"""
