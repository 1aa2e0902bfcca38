"""
qcomplex — complex numbers and complex math

Complex values interoperate with int and float through a single arithmetic
dispatch engine; every result with a zero imaginary part is returned as a
plain real.

    >>> from qcomplex import Complex, ib, o, to_polar
    >>> Complex(1, 2) * ib()
    Complex(re=-2, im=1)
    >>> o("1+2i") ** o("3+4i")
    Complex(re=0.129009594074467, im=0.03392409290517014)
"""

from qcomplex.core.contracts import (
    ComplexParseError,
    format_complex,
    o,
    parse,
    parse_strict,
)
from qcomplex.core.domain import Complex, Number, Real, ib, is_complex, is_real, normalize
from qcomplex.core.math import (
    DEFAULT_CONFIG,
    AngleMode,
    ArithmeticConfig,
    ConjugateDomainError,
    NegativeBaseBranch,
    Operator,
    PolarForm,
    absolute,
    add,
    apply,
    conj,
    divide,
    from_polar,
    multiply,
    negate,
    polar_power,
    power,
    subtract,
    to_polar,
    trig,
)

__version__ = "1.1.0"

__all__ = [
    # Value type
    "Complex",
    "Number",
    "Real",
    "ib",
    "is_complex",
    "is_real",
    "normalize",
    # Arithmetic
    "Operator",
    "apply",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "negate",
    "absolute",
    "conj",
    "ConjugateDomainError",
    # Polar
    "PolarForm",
    "to_polar",
    "from_polar",
    "polar_power",
    # Trigonometry
    "trig",
    # Config
    "AngleMode",
    "NegativeBaseBranch",
    "ArithmeticConfig",
    "DEFAULT_CONFIG",
    # Literals
    "parse",
    "parse_strict",
    "o",
    "format_complex",
    "ComplexParseError",
]
