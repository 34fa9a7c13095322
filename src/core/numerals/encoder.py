"""
Encoder — arabic → vinculum

Декомпозиция значения на цифры по степеням десяти (tier MAX_TIER..0)
и рендеринг каждой ненулевой цифры через SymbolTriplet своего tier.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 → "" (у нуля нет римского представления)
2. Графемы упорядочены от старшего tier к младшему
3. Значение, чья старшая цифра выходит за MAX_TIER → UnsupportedTierError
   до построения какого-либо вывода
4. Результат детерминирован
"""

from typing import Final

from src.core.domain.symbols import SymbolTriplet
from src.core.numerals.errors import (
    NegativeValueError,
    UnsupportedDigitError,
    UnsupportedTierError,
)
from src.core.numerals.symbol_table import MAX_TIER, triplet_for_tier

# Наибольшее кодируемое значение: 10^(MAX_TIER + 1) - 1
MAX_ENCODABLE_VALUE: Final[int] = 10 ** (MAX_TIER + 1) - 1

# Максимум 64-битного беззнакового целого
U64_MAX: Final[int] = 2**64 - 1

# Индексы глифов в тройке (one, five, ten) для цифр 1..9
_DIGIT_PATTERNS: Final[dict[int, tuple[int, ...]]] = {
    1: (0,),
    2: (0, 0),
    3: (0, 0, 0),
    4: (0, 1),
    5: (1,),
    6: (1, 0),
    7: (1, 0, 0),
    8: (1, 0, 0, 0),
    9: (0, 2),
}


def leading_tier(value: int) -> int:
    """
    Tier старшей цифры: floor(log10(value)) для value > 0.

    Считается по bit_length без преобразования в строку: str() для целых
    длиннее 4300 цифр запрещён (sys.set_int_max_str_digits).

    Examples:
        >>> leading_tier(9)
        0
        >>> leading_tier(10**21)
        21
    """
    # log10(2) ~ 0.30103, оценка снизу с точностью до одного tier
    tier = (value.bit_length() - 1) * 30103 // 100000
    while 10 ** (tier + 1) <= value:
        tier += 1
    while tier > 0 and 10**tier > value:
        tier -= 1
    return tier


def render_digit(digit: int, triplet: SymbolTriplet) -> str:
    """
    Рендеринг одной десятичной цифры через тройку глифов.

    1→one, 2→one·one, 3→one·one·one, 4→one·five, 5→five, 6→five·one,
    7→five·one·one, 8→five·one·one·one, 9→one·ten

    Args:
        digit: Цифра 1..9
        triplet: Тройка глифов tier

    Returns:
        Конкатенация глифов

    Raises:
        UnsupportedDigitError: если digit вне 1..9

    Examples:
        >>> render_digit(4, triplet_for_tier(0))
        'IV'
        >>> render_digit(8, triplet_for_tier(1))
        'LXXX'
    """
    pattern = _DIGIT_PATTERNS.get(digit)
    if pattern is None:
        raise UnsupportedDigitError(digit)

    glyphs = triplet.glyphs()
    return "".join(glyphs[index] for index in pattern)


def arabic_to_vinculum(value: int) -> str:
    """
    Конвертация целого числа в vinculum-нотацию.

    Args:
        value: Неотрицательное целое 0..MAX_ENCODABLE_VALUE

    Returns:
        Строка графем от старшего tier к младшему ("" для 0)

    Raises:
        TypeError: если value не int (bool тоже отвергается)
        NegativeValueError: если value < 0
        UnsupportedTierError: если value > MAX_ENCODABLE_VALUE

    Examples:
        >>> arabic_to_vinculum(0)
        ''
        >>> arabic_to_vinculum(1994) == "I\\u0305CI\\u0305XCIV"
        True
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")

    if value < 0:
        raise NegativeValueError(value)

    if value == 0:
        return ""

    if value > MAX_ENCODABLE_VALUE:
        raise UnsupportedTierError(leading_tier(value))

    parts: list[str] = []
    remaining = value

    for tier in range(MAX_TIER, 0, -1):
        divisor = 10**tier
        digit = remaining // divisor
        if digit > 0:
            parts.append(render_digit(digit, triplet_for_tier(tier)))
            remaining -= digit * divisor

    if remaining > 0:
        # remaining здесь однозначное
        parts.append(render_digit(remaining, triplet_for_tier(0)))

    return "".join(parts)
