"""
Symbol Table — Таблица символов vinculum-нотации

Единственный источник истины: упорядоченный список из 21 SymbolTriplet
(tier 0..20). Обе таблицы поиска строятся из него один раз при импорте:
- tier → SymbolTriplet (encode path)
- grapheme → GraphemeValue (decode path)

Декорации (Unicode combining marks):
- U+0305 COMBINING OVERLINE            (×10^3)
- U+033F COMBINING DOUBLE OVERLINE     (×10^6)
- U+0332 COMBINING LOW LINE            (+ double overline → ×10^9)
- U+0333 COMBINING DOUBLE LOW LINE     (+ double overline → ×10^12)
- U+20D2 COMBINING LONG VERTICAL LINE OVERLAY   (→ ×10^15)
- U+20E6 COMBINING DOUBLE VERTICAL STROKE OVERLAY (→ ×10^18)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. tier ∈ [0, MAX_TIER]; запрос вне диапазона → UnsupportedTierError
2. Поиск графемы: точное совпадение целого кластера
3. Таблицы immutable и не расходятся (одна производная от другой)
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.symbols import GraphemeValue, SymbolTriplet
from src.core.numerals.errors import UnknownGraphemeError, UnsupportedTierError

# =============================================================================
# DECORATIONS
# =============================================================================

_BAR: Final[str] = "\u0305"
_DOUBLE_BAR: Final[str] = "\u033f"
_UNDERLINE: Final[str] = "\u0332" + _DOUBLE_BAR
_DOUBLE_UNDERLINE: Final[str] = "\u0333" + _DOUBLE_BAR
_STROKE: Final[str] = "\u20d2" + _DOUBLE_UNDERLINE
_DOUBLE_STROKE: Final[str] = "\u20e6" + _DOUBLE_UNDERLINE

# Наибольший tier таблицы
MAX_TIER: Final[int] = 20


# =============================================================================
# CANONICAL TRIPLETS
# =============================================================================


def _triplet(tier: int, one: str, five: str, ten: str) -> SymbolTriplet:
    return SymbolTriplet(tier=tier, one=one, five=five, ten=ten)


SYMBOL_TRIPLETS: Final[tuple[SymbolTriplet, ...]] = (
    _triplet(0, "I", "V", "X"),
    _triplet(1, "X", "L", "C"),
    _triplet(2, "C", "D", "I" + _BAR),
    _triplet(3, "I" + _BAR, "V" + _BAR, "X" + _BAR),
    _triplet(4, "X" + _BAR, "L" + _BAR, "C" + _BAR),
    _triplet(5, "C" + _BAR, "D" + _BAR, "M" + _BAR),
    _triplet(6, "M" + _BAR, "V" + _DOUBLE_BAR, "X" + _DOUBLE_BAR),
    _triplet(7, "X" + _DOUBLE_BAR, "L" + _DOUBLE_BAR, "C" + _DOUBLE_BAR),
    _triplet(8, "C" + _DOUBLE_BAR, "D" + _DOUBLE_BAR, "M" + _DOUBLE_BAR),
    _triplet(9, "I" + _UNDERLINE, "V" + _UNDERLINE, "X" + _UNDERLINE),
    _triplet(10, "X" + _UNDERLINE, "L" + _UNDERLINE, "C" + _UNDERLINE),
    _triplet(11, "C" + _UNDERLINE, "D" + _UNDERLINE, "M" + _UNDERLINE),
    _triplet(12, "I" + _DOUBLE_UNDERLINE, "V" + _DOUBLE_UNDERLINE, "X" + _DOUBLE_UNDERLINE),
    _triplet(13, "X" + _DOUBLE_UNDERLINE, "L" + _DOUBLE_UNDERLINE, "C" + _DOUBLE_UNDERLINE),
    _triplet(14, "C" + _DOUBLE_UNDERLINE, "D" + _DOUBLE_UNDERLINE, "M" + _DOUBLE_UNDERLINE),
    _triplet(15, "I" + _STROKE, "V" + _STROKE, "X" + _STROKE),
    _triplet(16, "X" + _STROKE, "L" + _STROKE, "C" + _STROKE),
    _triplet(17, "C" + _STROKE, "D" + _STROKE, "M" + _STROKE),
    _triplet(18, "I" + _DOUBLE_STROKE, "V" + _DOUBLE_STROKE, "X" + _DOUBLE_STROKE),
    _triplet(19, "X" + _DOUBLE_STROKE, "L" + _DOUBLE_STROKE, "C" + _DOUBLE_STROKE),
    _triplet(20, "C" + _DOUBLE_STROKE, "D" + _DOUBLE_STROKE, "M" + _DOUBLE_STROKE),
)


# =============================================================================
# DERIVED GRAPHEME TABLE
# =============================================================================


def _build_grapheme_values(
    triplets: tuple[SymbolTriplet, ...],
) -> Mapping[str, GraphemeValue]:
    """
    Построение таблицы grapheme → GraphemeValue из списка triplets.

    one → (1, tier), five → (5, tier), ten → (1, tier + 1).
    Ten-глиф обычно совпадает с one-глифом следующего tier; M-варианты
    (tier 8, 11, 14, 17, 20) встречаются только как ten-глифы.

    Raises:
        ValueError: если одна графема получает два разных значения
    """
    table: dict[str, GraphemeValue] = {}

    def put(glyph: str, value: GraphemeValue) -> None:
        existing = table.setdefault(glyph, value)
        if existing != value:
            raise ValueError(
                f"Conflicting values for grapheme {glyph!r}: {existing} vs {value}"
            )

    for triplet in triplets:
        put(triplet.one, GraphemeValue(multiplier=1, tier=triplet.tier))
        put(triplet.five, GraphemeValue(multiplier=5, tier=triplet.tier))
        put(triplet.ten, GraphemeValue(multiplier=1, tier=triplet.tier + 1))

    return MappingProxyType(table)


GRAPHEME_VALUES: Final[Mapping[str, GraphemeValue]] = _build_grapheme_values(SYMBOL_TRIPLETS)


# =============================================================================
# LOOKUPS
# =============================================================================


def triplet_for_tier(tier: int) -> SymbolTriplet:
    """
    Тройка глифов для tier.

    Args:
        tier: Порядок степени десяти (0..MAX_TIER)

    Returns:
        SymbolTriplet для этого tier

    Raises:
        UnsupportedTierError: если tier вне [0, MAX_TIER]

    Examples:
        >>> triplet_for_tier(0).glyphs()
        ('I', 'V', 'X')
    """
    if not 0 <= tier <= MAX_TIER:
        raise UnsupportedTierError(tier)
    return SYMBOL_TRIPLETS[tier]


def grapheme_value(grapheme: str) -> GraphemeValue:
    """
    (multiplier, tier) пара для графемы.

    Raises:
        UnknownGraphemeError: если графемы нет в таблице
    """
    try:
        return GRAPHEME_VALUES[grapheme]
    except KeyError:
        raise UnknownGraphemeError(grapheme) from None


def value_of(grapheme: str) -> int:
    """
    Числовое значение графемы.

    Examples:
        >>> value_of("I")
        1
        >>> value_of("D" + "\\u0305")
        500000
    """
    return grapheme_value(grapheme).value


def supported_graphemes() -> tuple[str, ...]:
    """Все декодируемые графемы, по возрастанию значения."""
    return tuple(sorted(GRAPHEME_VALUES, key=lambda g: GRAPHEME_VALUES[g].value))
