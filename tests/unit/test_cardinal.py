"""
Тесты для количественных числительных

Проверяет:
1. Названия порядков (scale_to_words): singular/plural, неподдерживаемые индексы
2. Тысячи: mille, N+mila, tré → tre
3. Сборку из троек: пропуск нулевых, пробелы только между порядками
4. Знак, ноль, бесконечность
5. Дробную часть по цифрам
6. Отказ для >= 10^21
"""

import time

import pytest

from src.core.domain import REASON_SCALE_INDEX_UNSUPPORTED, CannotConvertError, Magnitude
from src.lang.it.cardinal import (
    CARDINAL_LIMIT,
    cardinal_words,
    ensure_spellable,
    fraction_to_words,
    integer_to_words,
    thousands_to_words,
)
from src.lang.it.scales import scale_to_words


def cardinal(number) -> str:
    return cardinal_words(Magnitude.of(number))


# =============================================================================
# SCALES
# =============================================================================


class TestScaleToWords:
    """Тесты для scale_to_words"""

    @pytest.mark.parametrize(
        "index, expected",
        [
            (2, "un milione"),
            (3, "un miliardo"),
            (4, "un bilione"),
            (5, "un biliardo"),
            (6, "un trilione"),
        ],
    )
    def test_singular(self, index: int, expected: str) -> None:
        assert scale_to_words(1, index) == expected

    @pytest.mark.parametrize(
        "value, index, expected",
        [
            (2, 2, "due milioni"),
            (23, 2, "ventitré milioni"),
            (21, 3, "ventuno miliardi"),
            (100, 6, "cento trilioni"),
        ],
    )
    def test_plural(self, value: int, index: int, expected: str) -> None:
        assert scale_to_words(value, index) == expected

    @pytest.mark.parametrize("index", [0, 1, 7, 10])
    def test_unsupported_index(self, index: int) -> None:
        with pytest.raises(CannotConvertError) as exc_info:
            scale_to_words(5, index)
        assert exc_info.value.reason == REASON_SCALE_INDEX_UNSUPPORTED


# =============================================================================
# THOUSANDS
# =============================================================================


class TestThousands:
    """Тесты для позиции тысяч"""

    def test_one_thousand(self) -> None:
        assert thousands_to_words(1) == "mille"

    def test_plural_thousands(self) -> None:
        assert thousands_to_words(2) == "duemila"
        assert thousands_to_words(21) == "ventunomila"

    def test_accent_removed_before_mila(self) -> None:
        assert thousands_to_words(23) == "ventitremila"
        assert thousands_to_words(123) == "centoventitremila"

    def test_plain_three_unchanged(self) -> None:
        assert thousands_to_words(3) == "tremila"


# =============================================================================
# INTEGERS
# =============================================================================


class TestIntegerToWords:
    """Тесты для integer_to_words"""

    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, "zero"),
            (1, "uno"),
            (101, "centouno"),
            (1000, "mille"),
            (1001, "milleuno"),
            (1990, "millenovecentonovanta"),
            (2000, "duemila"),
            (2023, "duemilaventitré"),
            (10_000, "diecimila"),
            (123_456, "centoventitremilaquattrocentocinquantasei"),
            (180_180, "centottantamilacentottanta"),
        ],
    )
    def test_below_million(self, n: int, expected: str) -> None:
        assert integer_to_words(n) == expected

    @pytest.mark.parametrize(
        "n, expected",
        [
            (1_000_000, "un milione"),
            (2_000_000, "due milioni"),
            (1_000_001, "un milione uno"),
            (1_001_000, "un milione mille"),
            (2_500_000, "due milioni cinquecentomila"),
            (23_000_023, "ventitré milioni ventitré"),
            (1_000_000_000, "un miliardo"),
            (10**12, "un bilione"),
            (10**15, "un biliardo"),
            (10**18, "un trilione"),
            (
                1_002_003_004,
                "un miliardo due milioni tremilaquattro",
            ),
        ],
    )
    def test_scales(self, n: int, expected: str) -> None:
        assert integer_to_words(n) == expected

    def test_largest_supported(self) -> None:
        words = integer_to_words(10**21 - 1)
        assert words.startswith("novecentonovantanove trilioni ")
        assert words.endswith("novecentonovantanovemilanovecentonovantanove")

    def test_too_large(self) -> None:
        with pytest.raises(CannotConvertError, match=REASON_SCALE_INDEX_UNSUPPORTED):
            integer_to_words(10**21)

    def test_limit_is_ten_to_21(self) -> None:
        assert CARDINAL_LIMIT == 10**21

    def test_huge_int_rejected_before_segmenting(self) -> None:
        n = 10**30_000
        start = time.perf_counter()
        with pytest.raises(CannotConvertError, match=REASON_SCALE_INDEX_UNSUPPORTED):
            integer_to_words(n)
        assert time.perf_counter() - start < 0.5

    def test_negative(self) -> None:
        assert integer_to_words(-5) == "meno cinque"
        assert integer_to_words(-1_000_000) == "meno un milione"


# =============================================================================
# CARDINAL (Magnitude)
# =============================================================================


class TestCardinalWords:
    """Тесты для cardinal_words"""

    def test_zero_independent_of_sign(self) -> None:
        assert cardinal(0) == "zero"
        assert cardinal("-0") == "zero"
        assert cardinal("0.000") == "zero"
        assert cardinal(-0.0) == "zero"

    def test_sign_emitted_once(self) -> None:
        for n in (1, 23, 1000, 123_456, 2_000_000, 10**18 + 7):
            assert cardinal(-n) == "meno " + cardinal(n)

    def test_infinity(self) -> None:
        assert cardinal(float("inf")) == "infinito"
        assert cardinal(float("-inf")) == "meno infinito"

    @pytest.mark.parametrize(
        "number, expected",
        [
            ("1.5", "uno virgola cinque"),
            (3.14, "tre virgola uno quattro"),
            ("2.50", "due virgola cinque"),
            ("10.05", "dieci virgola zero cinque"),
            ("0.5", "virgola cinque"),
            ("-1.5", "meno uno virgola cinque"),
            ("1000.001", "mille virgola zero zero uno"),
        ],
    )
    def test_fraction_digit_by_digit(self, number, expected: str) -> None:
        assert cardinal(number) == expected

    def test_integral_value_with_trailing_zeros(self) -> None:
        assert cardinal("21.000") == "ventuno"

    def test_too_large_exponent_notation(self) -> None:
        with pytest.raises(CannotConvertError):
            cardinal("1e21")

    @pytest.mark.parametrize("number", ["1e300000", "-1e300000", "1.5e300000"])
    def test_huge_exponent_rejected_fast(self, number: str) -> None:
        start = time.perf_counter()
        with pytest.raises(CannotConvertError) as exc_info:
            cardinal(number)
        assert time.perf_counter() - start < 0.5
        assert exc_info.value.reason == REASON_SCALE_INDEX_UNSUPPORTED

    def test_just_below_limit(self) -> None:
        assert cardinal("999999999999999999999.5").endswith("virgola cinque")

    def test_repeatable(self) -> None:
        assert cardinal(987_654_321) == cardinal(987_654_321)


class TestFractionToWords:
    """Тесты для fraction_to_words"""

    def test_digits(self) -> None:
        assert fraction_to_words((0, 9, 3)) == ["zero", "nove", "tre"]

    def test_invalid_digit(self) -> None:
        with pytest.raises(ValueError, match="Digit out of range"):
            fraction_to_words((10,))


class TestEnsureSpellable:
    """Тесты для ensure_spellable"""

    @pytest.mark.parametrize("number", [0, "-5.5", 10**21 - 1, "-999999999999999999999.99"])
    def test_accepts_below_limit(self, number) -> None:
        ensure_spellable(Magnitude.of(number))

    @pytest.mark.parametrize("number", [10**21, "-1e21", "1e300000", float("inf")])
    def test_rejects_from_limit(self, number) -> None:
        with pytest.raises(CannotConvertError) as exc_info:
            ensure_spellable(Magnitude.of(number))
        assert exc_info.value.reason == REASON_SCALE_INDEX_UNSUPPORTED
