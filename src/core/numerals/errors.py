"""
Vinculum Errors — иерархия исключений кодека

Все ошибки кодека наследуются от VinculumError:
- EncodeError: arabic → vinculum (UnsupportedTierError, UnsupportedDigitError,
  NegativeValueError)
- DecodeError: vinculum → arabic (UnknownGraphemeError, ArithmeticUnderflowError)

Частичный результат никогда не возвращается: ошибка пробрасывается сразу.
"""

from typing import Optional


class VinculumError(Exception):
    """Базовое исключение для всех ошибок конвертации."""
    pass


class EncodeError(VinculumError):
    """Ошибка кодирования arabic → vinculum."""
    pass


class DecodeError(VinculumError):
    """Ошибка декодирования vinculum → arabic."""
    pass


# =============================================================================
# ENCODE ERRORS
# =============================================================================


class UnsupportedTierError(EncodeError):
    """
    Tier за пределами таблицы символов.

    Возникает, когда старшая цифра значения попадает в tier > MAX_TIER,
    или когда запрошен triplet для несуществующего tier.
    """

    def __init__(self, tier: int):
        # symbol_table импортирует этот модуль
        from src.core.numerals.symbol_table import MAX_TIER

        self.tier = tier
        self.max_tier = MAX_TIER
        super().__init__(f"Unsupported tier: {tier} (supported tiers are 0..{MAX_TIER})")


class UnsupportedDigitError(EncodeError):
    """
    Цифра вне диапазона 1..9.

    Нарушение внутреннего инварианта: декомпозиция по степеням десяти
    никогда не выдаёт такую цифру.
    """

    def __init__(self, digit: int):
        self.digit = digit
        super().__init__(f"Unsupported number: {digit}")


class NegativeValueError(EncodeError, ValueError):
    """Отрицательные значения не имеют римского представления."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"value must be non-negative, got {value}")


# =============================================================================
# DECODE ERRORS
# =============================================================================


class UnknownGraphemeError(DecodeError):
    """Графема отсутствует в таблице символов."""

    def __init__(self, grapheme: str, position: Optional[int] = None):
        self.grapheme = grapheme
        self.position = position
        if position is None:
            message = f"Unknown grapheme {grapheme!r}"
        else:
            message = f"Unknown grapheme {grapheme!r} at position {position}"
        super().__init__(message)


class ArithmeticUnderflowError(DecodeError):
    """
    Правило single-lookback не может разрешить порядок графем.

    current - previous - previous < 0: значение предыдущей графемы уже
    добавлено в сумму, и вычесть его дважды невозможно.
    """

    def __init__(self, previous: int, current: int, position: Optional[int] = None):
        self.previous = previous
        self.current = current
        self.position = position
        super().__init__(
            f"Arithmetic underflow: {current} - {previous} - {previous} < 0"
            + (f" at position {position}" if position is not None else "")
        )
