"""
Arithmetic configuration — выбор ветвей полярных и степенных формул

Неизменяемая Pydantic-модель: исторические формулы или их корректные по
ветвям альтернативы. DEFAULT_CONFIG сохраняет историческое поведение;
конфигурация передаётся явно и никогда не мутирует.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class AngleMode(str, Enum):
    """Arctangent, используемый в to_polar"""

    ATAN = "atan"  # atan(im / re), корректен только при re > 0
    ATAN2 = "atan2"  # atan2(im, re), учитывает квадрант


class NegativeBaseBranch(str, Enum):
    """Отрицательное вещественное основание в комплексной степени"""

    MAGNITUDE = "magnitude"  # ln|a|, знак основания отбрасывается
    PRINCIPAL = "principal"  # ln|a| + iπ, главная ветвь


# =============================================================================
# CONFIG
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Конфигурация Arithmetic Dispatch.

    Examples:
        >>> ArithmeticConfig().angle_mode
        <AngleMode.ATAN: 'atan'>
        >>> ArithmeticConfig(angle_mode="atan2").angle_mode
        <AngleMode.ATAN2: 'atan2'>
    """

    angle_mode: AngleMode = Field(
        AngleMode.ATAN, description="Arctangent для полярного угла"
    )
    negative_base: NegativeBaseBranch = Field(
        NegativeBaseBranch.MAGNITUDE,
        description="Ветвь для отрицательного основания ** комплексный показатель",
    )

    model_config = {"frozen": True}


DEFAULT_CONFIG = ArithmeticConfig()
