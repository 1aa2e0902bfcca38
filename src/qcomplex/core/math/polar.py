"""
Polar Engine — прямоугольная ↔ полярная форма и степень по формуле Муавра

ФОРМУЛЫ:
    r = sqrt(re² + im²)
    θ = atan(im / re)                    (AngleMode.ATAN, default)
    θ = atan2(im, re)                    (AngleMode.ATAN2)
    z^p = r^p · (cos(pθ) + i·sin(pθ))    (de Moivre)

Одноаргументный arctangent по умолчанию точен только при re > 0: при
re < 0 угол попадает в противоположный квадрант. ATAN2 учитывает квадрант.
"""

import logging
import math
from typing import NamedTuple

from qcomplex.core.domain.complex_value import Complex, Number, Real, is_real, normalize
from qcomplex.core.math.arithmetic import Operator, apply_raw, coerce_number
from qcomplex.core.math.config import DEFAULT_CONFIG, AngleMode, ArithmeticConfig

logger = logging.getLogger(__name__)


class PolarForm(NamedTuple):
    """Полярные координаты (радиус, угол в радианах)"""

    r: float
    theta: float


def to_polar(z: Number, *, config: ArithmeticConfig = DEFAULT_CONFIG) -> PolarForm:
    """
    Полярные координаты комплексного числа.

    Real трактуется как (value, 0). При AngleMode.ATAN и re == 0 угол равен
    пределу atan, copysign(π/2, im), или 0 в начале координат.

    Args:
        z: Значение Complex (или Real)
        config: Конфигурация арифметики (default: DEFAULT_CONFIG)

    Returns:
        PolarForm(r, theta)

    Raises:
        TypeError: Если z не Real и не Complex

    Examples:
        >>> to_polar(Complex(7.0, -9.0))
        PolarForm(r=11.40175425099138, theta=-0.9097531579442097)
    """
    z = coerce_number(z)
    if isinstance(z, Complex):
        a, b = z.re, z.im
    else:
        a, b = z, 0

    r = math.sqrt(a**2 + b**2)

    if config.angle_mode is AngleMode.ATAN2:
        theta = math.atan2(b, a)
    elif a == 0:
        logger.debug("Zero real part in to_polar(%r), using limit of atan", z)
        theta = math.copysign(math.pi / 2, b) if b != 0 else 0.0
    else:
        theta = math.atan(b / a)

    return PolarForm(r, theta)


def from_polar(r: Real, theta: Real) -> Number:
    """
    Прямоугольная форма r·(cos θ + i·sin θ), нормализованная.

    Examples:
        >>> from_polar(2.0, 0.0)
        2.0
    """
    if not (is_real(r) and is_real(theta)):
        raise TypeError("from_polar expects real radius and angle")

    return normalize(Complex(r * math.cos(theta), r * math.sin(theta)))


def polar_power(
    z: Number, p: Real, *, config: ArithmeticConfig = DEFAULT_CONFIG
) -> Number:
    """
    Возведение z в вещественную степень по формуле Муавра.

    Args:
        z: Основание (Complex, или Real как (value, 0))
        p: Вещественный показатель
        config: Конфигурация арифметики, выбирает режим полярного угла

    Returns:
        Нормализованное r^p · (cos(pθ) + i·sin(pθ))

    Raises:
        TypeError: Если p не вещественное

    Examples:
        >>> polar_power(Complex(4.0, 0.0), 0.5)
        2.0
    """
    if not is_real(p):
        raise TypeError(f"polar_power expects a real exponent, got {type(p).__name__}")

    r, theta = to_polar(z, config=config)
    rotation = apply_raw(
        math.cos(p * theta),
        Complex(0, math.sin(p * theta)),
        Operator.ADD,
        config,
    )
    return normalize(apply_raw(r**p, rotation, Operator.MUL, config))
