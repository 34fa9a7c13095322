"""
Domain models and value objects.

Contains the symbol table entries and conversion results.
"""

from src.core.domain.conversion import ConversionDirection, ConversionResult
from src.core.domain.symbols import GRAPHEME_TIER_MAX, GraphemeValue, SymbolTriplet

__all__ = [
    # Symbols
    "GRAPHEME_TIER_MAX",
    "SymbolTriplet",
    "GraphemeValue",
    # Conversion
    "ConversionDirection",
    "ConversionResult",
]
