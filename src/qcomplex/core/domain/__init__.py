"""
Domain value objects.

Contains the Complex value type and the Real | Complex result helpers.
"""

from qcomplex.core.domain.complex_value import (
    Complex,
    Number,
    Real,
    ib,
    is_complex,
    is_real,
    normalize,
)

__all__ = [
    "Complex",
    "Number",
    "Real",
    "ib",
    "is_complex",
    "is_real",
    "normalize",
]
