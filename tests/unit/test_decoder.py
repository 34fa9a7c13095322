"""
Тесты для Decoder — vinculum → arabic

Проверяемые инварианты:
1. Табличные значения (обратные к encoder)
2. Single-lookback вычитание (IV, IX, XL, CD)
3. Разбиение на графемы: combining marks не отделяются от буквы
4. Permissive-декодирование неканонических последовательностей
5. UnknownGraphemeError без частичного результата
6. ArithmeticUnderflowError при неразрешимом порядке
"""

import pytest

from src.core.numerals import (
    ArithmeticUnderflowError,
    DecodeError,
    UnknownGraphemeError,
    fold_subtractive,
    split_graphemes,
    vinculum_to_arabic,
)

BAR = "\u0305"
DOUBLE_BAR = "\u033f"


def bar(letters: str) -> str:
    """Каждая буква с одинарной чертой."""
    return "".join(letter + BAR for letter in letters)


# Значения из эталонной таблицы конверсий
DECODE_CASES = [
    ("I", 1),
    ("II", 2),
    ("III", 3),
    ("IV", 4),
    ("V", 5),
    ("VI", 6),
    ("VII", 7),
    ("VIII", 8),
    ("IX", 9),
    ("X", 10),
    ("XI", 11),
    ("XII", 12),
    ("XIII", 13),
    ("XIV", 14),
    ("XV", 15),
    ("XIX", 19),
    ("XX", 20),
    ("XXIX", 29),
    ("XXXIX", 39),
    ("XL", 40),
    ("L", 50),
    ("LX", 60),
    ("C", 100),
    ("CLX", 160),
    ("CC", 200),
    ("CCXLVI", 246),
    ("CCVII", 207),
    ("CCC", 300),
    ("CD", 400),
    ("D", 500),
    ("DC", 600),
    ("DCCC", 800),
    ("CI̅", 900),
    ("DCCLXXXIX", 789),
    ("I̅", 1000),
    ("I̅IX", 1009),
    ("I̅LXVI", 1066),
    ("I̅DCCLXXVI", 1776),
    ("I̅CI̅XVIII", 1918),
    ("I̅CI̅LIV", 1954),
    ("I̅I̅XIV", 2014),
    ("I̅I̅CDXXI", 2421),
    ("I̅I̅I̅CI̅XCIX", 3999),
    ("I̅V̅", 4000),
    ("I̅V̅DCXXVII", 4627),
    ("V̅", 5000),
    ("V̅XV", 5015),
    ("V̅I̅", 6000),
    ("X̅", 10000),
    ("X̅V̅I̅I̅I̅XXXIV", 18034),
    ("X̅X̅", 20000),
    ("X̅X̅V̅", 25000),
    ("X̅X̅V̅CDLIX", 25459),
    ("L̅", 50000),
    ("C̅", 100000),
    ("D̅", 500000),
    ("D̅I", 500001),
    ("M̅", 1000000),
    ("M̅I", 1000001),
    ("M̅M̅", 2000000),
    ("M̅M̅M̅", 3000000),
]


# =============================================================================
# ТЕСТЫ: Табличные значения
# =============================================================================


class TestVinculumToArabicTable:
    """Эталонные конверсии vinculum → arabic."""

    @pytest.mark.parametrize("numeral, expected", DECODE_CASES)
    def test_reference_value(self, numeral, expected):
        assert vinculum_to_arabic(numeral) == expected

    def test_empty_is_zero(self):
        assert vinculum_to_arabic("") == 0

    def test_worked_examples(self):
        assert vinculum_to_arabic(bar("III") + "C" + bar("I") + "XCIX") == 3999
        assert vinculum_to_arabic(bar("I") + "C" + bar("I") + "XCIV") == 1994
        assert vinculum_to_arabic(bar("IV")) == 4000
        assert vinculum_to_arabic(bar("D") + "I") == 500001
        assert vinculum_to_arabic(bar("VI")) == 6000

    @pytest.mark.parametrize(
        "numeral, expected",
        [("IV", 4), ("IX", 9), ("XL", 40), ("XC", 90), ("CD", 400)],
    )
    def test_subtractive_pairs(self, numeral, expected):
        assert vinculum_to_arabic(numeral) == expected

    def test_double_bar_values(self):
        assert vinculum_to_arabic("V" + DOUBLE_BAR) == 5_000_000
        assert vinculum_to_arabic("D" + DOUBLE_BAR) == 500_000_000

    def test_m_variant_ten_glyph(self):
        """M̿: ten-глиф tier 8, декодируется как 10^9."""
        assert vinculum_to_arabic("M" + DOUBLE_BAR) == 10**9
        assert vinculum_to_arabic("C" + DOUBLE_BAR + "M" + DOUBLE_BAR) == 900_000_000


# =============================================================================
# ТЕСТЫ: Permissive-декодирование
# =============================================================================


class TestPermissiveDecoding:
    """Неканонические последовательности суммируются, а не отвергаются."""

    def test_repeated_ones(self):
        assert vinculum_to_arabic("IIII") == 4

    def test_invalid_subtractive_pair(self):
        """IC: не каноническая запись, но 100 - 1."""
        assert vinculum_to_arabic("IC") == 99

    def test_five_before_ten(self):
        """VX: 10 - 5 - 5 = 0, суммарно 5."""
        assert vinculum_to_arabic("VX") == 5

    def test_single_lookback_only(self):
        """IIX: lookback только на одну графему: 1 + 1 + (10 - 2) = 10."""
        assert vinculum_to_arabic("IIX") == 10


# =============================================================================
# ТЕСТЫ: Ошибки
# =============================================================================


class TestDecoderErrors:
    """UnknownGraphemeError / TypeError."""

    def test_unknown_grapheme(self):
        with pytest.raises(UnknownGraphemeError, match="Unknown grapheme") as exc_info:
            vinculum_to_arabic("Z")
        assert exc_info.value.grapheme == "Z"
        assert exc_info.value.position == 0

    def test_unknown_grapheme_position(self):
        with pytest.raises(UnknownGraphemeError) as exc_info:
            vinculum_to_arabic(bar("X") + "IVq")
        assert exc_info.value.grapheme == "q"
        assert exc_info.value.position == 3

    def test_lowercase_is_unknown(self):
        """Сравнение точное: регистр не нормализуется."""
        with pytest.raises(UnknownGraphemeError):
            vinculum_to_arabic("xiv")

    def test_whitespace_is_unknown(self):
        with pytest.raises(UnknownGraphemeError):
            vinculum_to_arabic("X I")

    def test_unknown_decoration_is_unknown(self):
        """I + combining tilde: целый кластер отсутствует в таблице."""
        with pytest.raises(UnknownGraphemeError) as exc_info:
            vinculum_to_arabic("I\u0303")
        assert exc_info.value.grapheme == "I\u0303"

    def test_bare_combining_mark_is_unknown(self):
        with pytest.raises(UnknownGraphemeError):
            vinculum_to_arabic(BAR)

    def test_unknown_grapheme_is_decode_error(self):
        with pytest.raises(DecodeError):
            vinculum_to_arabic("MMXQ")

    @pytest.mark.parametrize("text", [14, None, b"XIV"])
    def test_non_str_rejected(self, text):
        with pytest.raises(TypeError, match="must be a str"):
            vinculum_to_arabic(text)


# =============================================================================
# ТЕСТЫ: Разбиение на графемы
# =============================================================================


class TestSplitGraphemes:
    """Combining marks остаются при базовой букве."""

    def test_plain_letters(self):
        assert split_graphemes("MCM") == ["M", "C", "M"]

    def test_overlined_letters(self):
        assert split_graphemes(bar("IV") + "I") == ["I" + BAR, "V" + BAR, "I"]

    def test_stacked_marks_single_cluster(self):
        glyph = "X\u20e6\u0333\u033f"
        assert split_graphemes(glyph + glyph) == [glyph, glyph]

    def test_empty(self):
        assert split_graphemes("") == []


# =============================================================================
# ТЕСТЫ: Свёртка single-lookback
# =============================================================================


class TestFoldSubtractive:
    """fold_subtractive на сырых значениях."""

    def test_empty(self):
        assert fold_subtractive([]) == 0

    def test_additive(self):
        assert fold_subtractive([1000, 100, 10, 1]) == 1111

    def test_subtractive(self):
        assert fold_subtractive([1, 10]) == 9
        assert fold_subtractive([10, 1, 5]) == 14

    def test_equal_values_add(self):
        assert fold_subtractive([10, 10]) == 20

    def test_zero_term_allowed(self):
        """value - prev - prev == 0 не является underflow."""
        assert fold_subtractive([5, 10]) == 5

    def test_underflow(self):
        """6 < 10, но 10 - 6 - 6 < 0."""
        with pytest.raises(ArithmeticUnderflowError, match="underflow") as exc_info:
            fold_subtractive([6, 10])
        assert exc_info.value.previous == 6
        assert exc_info.value.current == 10
        assert exc_info.value.position == 1

    def test_underflow_is_decode_error(self):
        with pytest.raises(DecodeError):
            fold_subtractive([1, 1, 7, 9])

    def test_accepts_iterator(self):
        assert fold_subtractive(iter([100, 500])) == 400
