"""
Symbols — Модели элементов таблицы символов

Immutable Pydantic модели:
- SymbolTriplet: (one, five, ten) глифы одного tier
- GraphemeValue: (multiplier, tier) пара для одной графемы

Графема: базовая латинская буква плюс ноль или более combining marks
(overline, double overline, low line, overlay strokes). Сравнение всегда
по целому кластеру.
"""

from typing import Final, Literal

from pydantic import BaseModel, Field, field_validator


# Наибольший tier, для которого определены графемы.
# Tier 21 встречается только как ten-глиф tier 20 (M⃦̳̿).
GRAPHEME_TIER_MAX: Final[int] = 21


# =============================================================================
# SYMBOL TRIPLET
# =============================================================================


class SymbolTriplet(BaseModel):
    """
    Тройка глифов одного tier.

    Цифры 1..9 рендерятся по фиксированному шаблону из (one, five, ten);
    ten-глиф заимствован из one-глифа следующего tier.
    """

    tier: int = Field(..., ge=0, description="Порядок степени десяти (0 = I/V/X)")
    one: str = Field(..., min_length=1, description="Глиф для 1 × 10^tier")
    five: str = Field(..., min_length=1, description="Глиф для 5 × 10^tier")
    ten: str = Field(..., min_length=1, description="Глиф для 10 × 10^tier")

    model_config = {"frozen": True}

    @field_validator("one", "five", "ten")
    @classmethod
    def validate_base_letter(cls, v: str) -> str:
        """Глиф начинается с римской буквы, далее только combining marks."""
        if v[0] not in "IVXLCDM":
            raise ValueError(f"glyph {v!r} must start with a Roman letter")
        if any(ch.isalnum() for ch in v[1:]):
            raise ValueError(f"glyph {v!r} must be a single grapheme")
        return v

    def glyphs(self) -> tuple[str, str, str]:
        """Упорядоченная тройка (one, five, ten)."""
        return (self.one, self.five, self.ten)


# =============================================================================
# GRAPHEME VALUE
# =============================================================================


class GraphemeValue(BaseModel):
    """
    Числовое значение графемы: multiplier × 10^tier.
    """

    multiplier: Literal[1, 5] = Field(..., description="Базовый множитель (1 или 5)")
    tier: int = Field(
        ..., ge=0, le=GRAPHEME_TIER_MAX, description="Порядок степени десяти"
    )

    model_config = {"frozen": True}

    @property
    def value(self) -> int:
        """Точное целое значение графемы."""
        return self.multiplier * 10**self.tier
