"""
Numerical Safeguards — сравнения Real | Complex с учётом толерантности

Float-результаты полярных и тригонометрических формул не бывают побитово
точными; сравнение выполняется через is_close с явной толерантностью.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения работают для любой комбинации Real и Complex
2. Real сравнивается с Complex как (value, 0)
3. NaN/Inf не близки ни к чему, кроме Inf того же знака (правила math.isclose)
"""

import math
from typing import Final

from qcomplex.core.domain.complex_value import Complex, Number, is_complex, is_real

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Нужен около нуля, где относительная толерантность вырождается
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ ВАЛИДНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что float конечен (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True, если value конечно
    """
    return math.isfinite(value)


def is_valid_number(value: Number) -> bool:
    """
    Проверка, что все компоненты Real или Complex конечны.

    Args:
        value: Real или Complex

    Returns:
        True, если каждая компонента конечна

    Raises:
        TypeError: Если value не Real и не Complex
    """
    if is_complex(value):
        return is_valid_float(value.re) and is_valid_float(value.im)

    if is_real(value):
        return is_valid_float(value)

    raise TypeError(f"Expected a real or complex number, got {type(value).__name__}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def _components(value: Number) -> tuple[float, float]:
    if isinstance(value, Complex):
        return (value.re, value.im)

    if is_real(value):
        return (value, 0.0)

    raise TypeError(f"Expected a real or complex number, got {type(value).__name__}")


def is_close(
    a: Number,
    b: Number,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение с float-толерантностью.

    Алгоритм (для каждой компоненты):
        abs(x - y) <= max(rel_tol * max(abs(x), abs(y)), abs_tol)

    Args:
        a: Первое значение (Real или Complex)
        b: Второе значение (Real или Complex)
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True, если близки и вещественные, и мнимые части

    Examples:
        >>> is_close(Complex(1.0, 2.0), Complex(1.0, 2.0 + 1e-12))
        True
        >>> is_close(3.0, Complex(3.0, 1e-13))
        True
        >>> is_close(Complex(1.0, 2.0), Complex(1.0, -2.0))
        False
    """
    a_re, a_im = _components(a)
    b_re, b_im = _components(b)

    return math.isclose(a_re, b_re, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
        a_im, b_im, rel_tol=rel_tol, abs_tol=abs_tol
    )


def is_zero(value: Number, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, что Real или Complex лежит в пределах tol от нуля (покомпонентно).

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True, если abs(re) <= tol and abs(im) <= tol
    """
    re, im = _components(value)
    return abs(re) <= tol and abs(im) <= tol
