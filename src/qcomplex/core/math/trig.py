"""
Trigonometric Layer — круговые и гиперболические функции над Real | Complex

Вещественный аргумент передаётся в модуль math; комплексный вычисляется по
тождествам ниже через Arithmetic Dispatch, поэтому каждый результат
нормализован.

ТОЖДЕСТВА (z = a + bi):
    sin(z)  = sin(a)·cosh(b) + i·cos(a)·sinh(b)
    cos(z)  = cos(a)·cosh(b) - i·sin(a)·sinh(b)   (via conj(z))
    sinh(z) = cos(b)·sinh(a) + i·sin(b)·cosh(a)
    cosh(z) = cos(b)·cosh(a) + i·sin(b)·sinh(a)

    tan = sin/cos, cot = cos/sin, sec = 1/cos, csc = 1/sin
    tanh = sinh/cosh, coth = cosh/sinh, sech = 1/cosh, csch = 1/sinh

Аргумент Complex с im == 0 сначала нормализуется к вещественной части.
NaN в компонентах пропагирует в результат без исключения.
"""

import math

from qcomplex.core.domain.complex_value import Complex, Number, ib, normalize
from qcomplex.core.math.arithmetic import add, coerce_number, conj, divide


def _argument(x: Number) -> Number:
    return normalize(coerce_number(x))


# =============================================================================
# БАЗОВЫЕ ФУНКЦИИ
# =============================================================================


def sin(x: Number) -> Number:
    """
    Синус.

    Examples:
        >>> sin(0.0)
        0.0
        >>> sin(Complex(-11.0, -2.0))
        Complex(re=3.762158846210887, im=-0.016051388809949604)
    """
    x = _argument(x)
    if isinstance(x, Complex):
        return add(
            math.sin(x.re) * math.cosh(x.im),
            ib(math.cos(x.re) * math.sinh(x.im)),
        )

    return math.sin(x)


def cos(x: Number) -> Number:
    """Косинус, через conj(z)."""
    x = _argument(x)
    if isinstance(x, Complex):
        w = conj(x)
        return add(
            math.cos(w.re) * math.cosh(w.im),
            ib(math.sin(w.re) * math.sinh(w.im)),
        )

    return math.cos(x)


def sinh(x: Number) -> Number:
    """Гиперболический синус."""
    x = _argument(x)
    if isinstance(x, Complex):
        return add(
            math.cos(x.im) * math.sinh(x.re),
            ib(math.sin(x.im) * math.cosh(x.re)),
        )

    return math.sinh(x)


def cosh(x: Number) -> Number:
    """Гиперболический косинус."""
    x = _argument(x)
    if isinstance(x, Complex):
        return add(
            math.cos(x.im) * math.cosh(x.re),
            ib(math.sin(x.im) * math.sinh(x.re)),
        )

    return math.cosh(x)


# =============================================================================
# ПРОИЗВОДНЫЕ КРУГОВЫЕ ФУНКЦИИ
# =============================================================================


def tan(x: Number) -> Number:
    """Тангенс, sin/cos."""
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(sin(x), cos(x))

    return math.tan(x)


def cot(x: Number) -> Number:
    """Котангенс, cos/sin."""
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(cos(x), sin(x))

    return math.cos(x) / math.sin(x)


def sec(x: Number) -> Number:
    """Секанс, 1/cos."""
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(1, cos(x))

    return 1 / math.cos(x)


def csc(x: Number) -> Number:
    """Косеканс, 1/sin."""
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(1, sin(x))

    return 1 / math.sin(x)


# =============================================================================
# ПРОИЗВОДНЫЕ ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def tanh(x: Number) -> Number:
    """Гиперболический тангенс, sinh/cosh."""
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(sinh(x), cosh(x))

    return math.tanh(x)


def coth(x: Number) -> Number:
    """Гиперболический котангенс, cosh/sinh."""
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(cosh(x), sinh(x))

    return math.cosh(x) / math.sinh(x)


def sech(x: Number) -> Number:
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(1, cosh(x))

    return 1 / math.cosh(x)


def csch(x: Number) -> Number:
    x = _argument(x)
    if isinstance(x, Complex):
        return divide(1, sinh(x))

    return 1 / math.sinh(x)
