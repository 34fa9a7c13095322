"""
Decoder — vinculum → arabic

1. Разбиение строки на extended grapheme clusters (regex \\X):
   combining marks остаются прикреплёнными к базовой букве.
2. Каждая графема → значение через таблицу символов.
3. Свёртка слева направо с single-lookback вычитанием.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Первая неизвестная графема → UnknownGraphemeError, без частичного результата
2. prev < next → добавляется next - prev - prev (prev уже был добавлен)
3. next - prev - prev < 0 → ArithmeticUnderflowError
4. Валидация канонической формы НЕ выполняется: "IIII", "IC", "VX"
   декодируются как есть
"""

from typing import Iterable

import regex

from src.core.numerals.errors import (
    ArithmeticUnderflowError,
    UnknownGraphemeError,
)
from src.core.numerals.symbol_table import value_of

_GRAPHEME_CLUSTER = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """
    Разбиение строки на графемы (extended grapheme clusters).

    Examples:
        >>> split_graphemes("XIV")
        ['X', 'I', 'V']
        >>> len(split_graphemes("I\\u0305I\\u0305"))
        2
    """
    return _GRAPHEME_CLUSTER.findall(text)


def fold_subtractive(values: Iterable[int]) -> int:
    """
    Сумма значений по правилу single-lookback.

    Для каждого нового значения:
    - prev < value → добавляется value - prev - prev
      (итоговый вклад пары: value - prev)
    - иначе → добавляется value

    Args:
        values: Значения графем в порядке чтения

    Returns:
        Точная целая сумма (0 для пустой последовательности)

    Raises:
        ArithmeticUnderflowError: если value - prev - prev < 0

    Examples:
        >>> fold_subtractive([1, 10])
        9
        >>> fold_subtractive([10, 1, 5])
        14
    """
    total = 0
    previous = None

    for position, value in enumerate(values):
        if previous is not None and previous < value:
            term = value - previous - previous
            if term < 0:
                raise ArithmeticUnderflowError(previous, value, position)
        else:
            term = value
        total += term
        previous = value

    return total


def vinculum_to_arabic(text: str) -> int:
    """
    Конвертация vinculum-нотации в целое число.

    Args:
        text: Строка графем (пустая строка → 0)

    Returns:
        Неотрицательное целое

    Raises:
        TypeError: если text не str
        UnknownGraphemeError: первая графема, отсутствующая в таблице
        ArithmeticUnderflowError: порядок графем не разрешим single-lookback

    Examples:
        >>> vinculum_to_arabic("IX")
        9
        >>> vinculum_to_arabic("V\\u0305I\\u0305")
        6000
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    values: list[int] = []
    for position, grapheme in enumerate(split_graphemes(text)):
        try:
            values.append(value_of(grapheme))
        except UnknownGraphemeError:
            raise UnknownGraphemeError(grapheme, position) from None

    return fold_subtractive(values)
