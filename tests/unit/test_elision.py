"""
Тесты для правил элизии и ударения

Каждое правило проверяется изолированно.
"""

import pytest

from src.lang.it.elision import (
    apocope_uno,
    deaccent_before_mila,
    drop_final_vowel,
    elide_tens,
    hundreds_word,
    unit_after_tens,
)


class TestDropFinalVowel:
    """Тесты для drop_final_vowel"""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("undici", "undic"),
            ("venti", "vent"),
            ("ventitré", "ventitr"),
            ("mille", "mill"),
            ("cento", "cent"),
        ],
    )
    def test_vowel_dropped(self, word: str, expected: str) -> None:
        assert drop_final_vowel(word) == expected

    def test_consonant_kept(self) -> None:
        assert drop_final_vowel("dirham") == "dirham"

    def test_empty(self) -> None:
        assert drop_final_vowel("") == ""


class TestHundredsWord:
    """Тесты для hundreds_word"""

    def test_elided_before_eighty(self) -> None:
        assert hundreds_word(8) == "cent"

    @pytest.mark.parametrize("tens_digit", [0, 1, 2, 7, 9])
    def test_full_otherwise(self, tens_digit: int) -> None:
        assert hundreds_word(tens_digit) == "cento"


class TestElideTens:
    """Тесты для elide_tens"""

    @pytest.mark.parametrize("units_digit", [1, 8])
    def test_elided(self, units_digit: int) -> None:
        assert elide_tens("quaranta", units_digit) == "quarant"

    @pytest.mark.parametrize("units_digit", [0, 2, 3, 9])
    def test_kept(self, units_digit: int) -> None:
        assert elide_tens("quaranta", units_digit) == "quaranta"


class TestUnitAfterTens:
    """Тесты для unit_after_tens"""

    def test_three_accented(self) -> None:
        assert unit_after_tens(3) == "tré"

    def test_zero_silent(self) -> None:
        assert unit_after_tens(0) == ""

    def test_regular(self) -> None:
        assert unit_after_tens(7) == "sette"


class TestDeaccentBeforeMila:
    """Тесты для deaccent_before_mila"""

    def test_accent_removed(self) -> None:
        assert deaccent_before_mila("ventitré") == "ventitre"

    def test_other_words_unchanged(self) -> None:
        assert deaccent_before_mila("cento") == "cento"
        assert deaccent_before_mila("tre") == "tre"


class TestApocopeUno:
    """Тесты для apocope_uno"""

    def test_uno(self) -> None:
        assert apocope_uno("uno") == "un"

    def test_compound(self) -> None:
        assert apocope_uno("un milione trentuno") == "un milione trentun"

    def test_unchanged(self) -> None:
        assert apocope_uno("undici") == "undici"
        assert apocope_uno("zero") == "zero"
