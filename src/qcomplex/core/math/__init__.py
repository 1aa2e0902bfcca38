"""
Core math modules для qcomplex

Arithmetic dispatch, polar engine, тригонометрия и сравнения с толерантностью.
"""

# Configuration
from qcomplex.core.math.config import (
    DEFAULT_CONFIG,
    AngleMode,
    ArithmeticConfig,
    NegativeBaseBranch,
)

# Arithmetic Dispatch
from qcomplex.core.math.arithmetic import (
    ConjugateDomainError,
    Operator,
    absolute,
    add,
    apply,
    apply_raw,
    coerce_number,
    conj,
    divide,
    multiply,
    negate,
    power,
    subtract,
)

# Polar Engine
from qcomplex.core.math.polar import (
    PolarForm,
    from_polar,
    polar_power,
    to_polar,
)

# Numerical Safeguards
from qcomplex.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    is_valid_number,
    is_zero,
)

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "AngleMode",
    "ArithmeticConfig",
    "NegativeBaseBranch",
    # Arithmetic Dispatch — Types
    "Operator",
    # Arithmetic Dispatch — Exceptions
    "ConjugateDomainError",
    # Arithmetic Dispatch — Functions
    "absolute",
    "add",
    "apply",
    "apply_raw",
    "coerce_number",
    "conj",
    "divide",
    "multiply",
    "negate",
    "power",
    "subtract",
    # Polar Engine
    "PolarForm",
    "from_polar",
    "polar_power",
    "to_polar",
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "is_close",
    "is_valid_float",
    "is_valid_number",
    "is_zero",
]
