"""
ConversionResult — Результат одной конвертации

Immutable Pydantic модель, сериализуемая CLI в режиме --json.
Полная совместимость с JSON Schema (contracts/schema/conversion_result.json).
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ConversionDirection(str, Enum):
    """Направление конвертации"""

    ENCODE = "encode"  # arabic → vinculum
    DECODE = "decode"  # vinculum → arabic


# =============================================================================
# CONVERSION RESULT MODEL
# =============================================================================


class ConversionResult(BaseModel):
    """
    Пара (arabic, vinculum) с направлением конвертации.

    Immutable модель (frozen=True).
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    direction: ConversionDirection = Field(..., description="encode или decode")
    arabic: int = Field(..., ge=0, description="Целое значение")
    vinculum: str = Field(..., description="Vinculum-нотация ('' для 0)")

    model_config = {"frozen": True}
