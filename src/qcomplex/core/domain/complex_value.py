"""
Complex — неизменяемое комплексное значение и тип результата Real | Complex

Value object для точки комплексной плоскости. Операции никогда не мутируют
Complex: каждый арифметический вызов создаёт новый.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметическая операция никогда не возвращает Complex с im == 0;
   normalize() сворачивает его к вещественной части
2. Real (int, float) не превращается в Complex, пока операция не даст
   ненулевую мнимую часть
3. bool не является Real
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Complex:
    """
    Комплексное число re + im·i.

    Операторы (+, -, *, /, **, унарный -, abs) это синтаксический сахар над
    qcomplex.core.math.arithmetic; результат всегда нормализован, поэтому
    `Complex(1, 2) * Complex(1, -2)` это вещественное `5`, а не Complex.

    Examples:
        >>> Complex(1, 2) * ib()
        Complex(re=-2, im=1)
        >>> str(Complex(2.3, -1.0))
        '2.3-1.0i'
    """

    re: float
    im: float

    def __add__(self, other):
        from qcomplex.core.math.arithmetic import add

        return add(self, other)

    def __radd__(self, other):
        from qcomplex.core.math.arithmetic import add

        return add(other, self)

    def __sub__(self, other):
        from qcomplex.core.math.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other):
        from qcomplex.core.math.arithmetic import subtract

        return subtract(other, self)

    def __mul__(self, other):
        from qcomplex.core.math.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other):
        from qcomplex.core.math.arithmetic import multiply

        return multiply(other, self)

    def __truediv__(self, other):
        from qcomplex.core.math.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other):
        from qcomplex.core.math.arithmetic import divide

        return divide(other, self)

    def __pow__(self, other):
        from qcomplex.core.math.arithmetic import power

        return power(self, other)

    def __rpow__(self, other):
        from qcomplex.core.math.arithmetic import power

        return power(other, self)

    def __neg__(self):
        from qcomplex.core.math.arithmetic import negate

        return negate(self)

    def __abs__(self):
        from qcomplex.core.math.arithmetic import absolute

        return absolute(self)

    def conjugate(self) -> "Complex":
        """Комплексное сопряжение (ConjugateDomainError при im == 0)."""
        from qcomplex.core.math.arithmetic import conj

        return conj(self)

    def __str__(self) -> str:
        from qcomplex.core.contracts.literal import format_complex

        return format_complex(self)


# Real | Complex: результат любой арифметической операции
Real = Union[int, float]
Number = Union[int, float, Complex]


def ib(b: Real = 1) -> Complex:
    """
    Мнимая единица, умноженная на b.

    Args:
        b: Мнимая компонента (default: 1)

    Returns:
        Complex(0, b)

    Examples:
        >>> str(ib())
        'i'
        >>> str(ib(-5))
        '-5i'
    """
    return Complex(0, b)


def is_complex(value: object) -> bool:
    """True, если value является Complex."""
    return isinstance(value, Complex)


def is_real(value: object) -> bool:
    """True, если value это нативный int или float (bool исключён)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize(value: Number) -> Number:
    """
    Свёртка Complex с нулевой мнимой частью к вещественной компоненте.

    Применяется один раз на границе каждой публичной арифметической операции.

    Args:
        value: Real или Complex

    Returns:
        value.re, если value это Complex с im == 0, иначе value без изменений

    Examples:
        >>> normalize(Complex(3.0, 0.0))
        3.0
        >>> normalize(Complex(3.0, 1.0))
        Complex(re=3.0, im=1.0)
        >>> normalize(7)
        7
    """
    if isinstance(value, Complex) and value.im == 0:
        return value.re

    return value
