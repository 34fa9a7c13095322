"""
Core numerals modules для vinculum-кодека

Двунаправленная конвертация arabic ↔ vinculum поверх общей таблицы символов.
"""

# Errors
from src.core.numerals.errors import (
    ArithmeticUnderflowError,
    DecodeError,
    EncodeError,
    NegativeValueError,
    UnknownGraphemeError,
    UnsupportedDigitError,
    UnsupportedTierError,
    VinculumError,
)

# Symbol Table
from src.core.numerals.symbol_table import (
    GRAPHEME_VALUES,
    MAX_TIER,
    SYMBOL_TRIPLETS,
    grapheme_value,
    supported_graphemes,
    triplet_for_tier,
    value_of,
)

# Encoder (arabic → vinculum)
from src.core.numerals.encoder import (
    MAX_ENCODABLE_VALUE,
    U64_MAX,
    arabic_to_vinculum,
    leading_tier,
    render_digit,
)

# Decoder (vinculum → arabic)
from src.core.numerals.decoder import (
    fold_subtractive,
    split_graphemes,
    vinculum_to_arabic,
)

__all__ = [
    # Errors
    "VinculumError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTierError",
    "UnsupportedDigitError",
    "NegativeValueError",
    "UnknownGraphemeError",
    "ArithmeticUnderflowError",
    # Symbol Table — Constants
    "MAX_TIER",
    "SYMBOL_TRIPLETS",
    "GRAPHEME_VALUES",
    # Symbol Table — Functions
    "triplet_for_tier",
    "grapheme_value",
    "value_of",
    "supported_graphemes",
    # Encoder — Constants
    "MAX_ENCODABLE_VALUE",
    "U64_MAX",
    # Encoder — Functions
    "arabic_to_vinculum",
    "leading_tier",
    "render_digit",
    # Decoder — Functions
    "split_graphemes",
    "fold_subtractive",
    "vinculum_to_arabic",
]
