"""
Тесты для Trigonometric Layer

Проверяет:
1. Вещественный аргумент передаётся в модуль math
2. Комплексные тождества против cmath как эталона
3. cos через сопряжение совпадает с прямой формулой
4. Complex с нулевой мнимой частью нормализуется, результаты нормализованы
5. NaN пропагирует без исключений
"""

import cmath
import math

import pytest

from qcomplex.core.domain.complex_value import Complex, ib
from qcomplex.core.math import trig
from qcomplex.core.math.arithmetic import absolute
from qcomplex.core.math.numerical_safeguards import is_close, is_valid_number

COMPLEX_INPUTS = [
    Complex(-11.0, -2.0),
    Complex(0.5, 1.0),
    Complex(1.2, -0.3),
    Complex(-2.0, 0.75),
    ib(1.5),
]

REFERENCE = {
    "sin": cmath.sin,
    "cos": cmath.cos,
    "sinh": cmath.sinh,
    "cosh": cmath.cosh,
    "tan": cmath.tan,
    "tanh": cmath.tanh,
    "cot": lambda w: cmath.cos(w) / cmath.sin(w),
    "sec": lambda w: 1 / cmath.cos(w),
    "csc": lambda w: 1 / cmath.sin(w),
    "coth": lambda w: cmath.cosh(w) / cmath.sinh(w),
    "sech": lambda w: 1 / cmath.cosh(w),
    "csch": lambda w: 1 / cmath.sinh(w),
}


def _as_builtin(z: Complex) -> complex:
    return complex(z.re, z.im)


class TestRealInput:
    """Вещественные аргументы"""

    def test_base_functions(self) -> None:
        """sin, cos, sinh, cosh совпадают с math"""
        assert trig.sin(0.3) == math.sin(0.3)
        assert trig.cos(0.3) == math.cos(0.3)
        assert trig.sinh(0.3) == math.sinh(0.3)
        assert trig.cosh(0.3) == math.cosh(0.3)

    def test_derived_functions(self) -> None:
        """Частные и обратные величины базовых функций"""
        assert trig.tan(1.0) == math.tan(1.0)
        assert trig.tanh(1.0) == math.tanh(1.0)
        assert trig.cot(1.0) == pytest.approx(1 / math.tan(1.0))
        assert trig.sec(0.0) == 1.0
        assert trig.csc(1.0) == pytest.approx(1 / math.sin(1.0))
        assert trig.coth(1.0) == pytest.approx(1 / math.tanh(1.0))
        assert trig.sech(0.0) == 1.0
        assert trig.csch(1.0) == pytest.approx(1 / math.sinh(1.0))

    def test_integer_input(self) -> None:
        """Аргументы int допустимы"""
        assert trig.sin(0) == 0.0


class TestComplexInput:
    """Комплексные аргументы"""

    def test_sine_reference_value(self) -> None:
        """sin(-11-2i)"""
        result = trig.sin(Complex(-11.0, -2.0))
        assert is_close(result, Complex(3.762158846210887, -0.016051388809949604))

    @pytest.mark.parametrize("name", sorted(REFERENCE))
    @pytest.mark.parametrize("z", COMPLEX_INPUTS)
    def test_matches_cmath(self, name: str, z: Complex) -> None:
        """Каждая функция согласуется с cmath"""
        expected = REFERENCE[name](_as_builtin(z))
        result = getattr(trig, name)(z)
        assert is_close(result, Complex(expected.real, expected.imag), rel_tol=1e-9, abs_tol=1e-12)

    @pytest.mark.parametrize("z", COMPLEX_INPUTS)
    def test_cosine_via_conjugate_matches_direct_formula(self, z: Complex) -> None:
        """cos(a+bi) = cos(a)cosh(b) - i·sin(a)sinh(b)"""
        a, b = z.re, z.im
        direct = Complex(math.cos(a) * math.cosh(b), -math.sin(a) * math.sinh(b))
        assert is_close(trig.cos(z), direct)

    @pytest.mark.parametrize("z", COMPLEX_INPUTS)
    def test_pythagorean_identity(self, z: Complex) -> None:
        """sin² + cos² = 1 с точностью до порядка слагаемых"""
        scale = max(1.0, absolute(trig.sin(z)) ** 2)
        assert is_close(trig.sin(z) ** 2 + trig.cos(z) ** 2, 1.0, abs_tol=1e-9 * scale)

    @pytest.mark.parametrize("z", COMPLEX_INPUTS)
    def test_hyperbolic_identity(self, z: Complex) -> None:
        """cosh² - sinh² = 1 с точностью до порядка слагаемых"""
        # |cosh(-11-2i)|² ~ 9e8: разность двух таких квадратов теряет ~1e-7
        scale = max(1.0, absolute(trig.cosh(z)) ** 2)
        assert is_close(trig.cosh(z) ** 2 - trig.sinh(z) ** 2, 1.0, abs_tol=1e-9 * scale)


class TestNormalization:
    """Нулевая мнимая часть на входе и выходе"""

    def test_zero_imaginary_input_is_treated_as_real(self) -> None:
        """cos(1+0i) не вызывает ConjugateDomainError"""
        assert trig.cos(Complex(1.0, 0.0)) == math.cos(1.0)

    def test_result_collapses_to_real(self) -> None:
        """sinh(0+0i) это обычное вещественное число"""
        result = trig.sinh(ib(0))
        assert result == 0.0
        assert not isinstance(result, Complex)

    def test_pure_imaginary_sine_has_zero_real_part(self) -> None:
        """sin(bi) = i·sinh(b)"""
        result = trig.sin(ib(2.0))
        assert isinstance(result, Complex)
        assert result.re == 0.0
        assert result.im == pytest.approx(math.sinh(2.0))

    def test_invalid_input(self) -> None:
        """Нечисловые аргументы отклоняются"""
        with pytest.raises(TypeError):
            trig.sin("0.5")


class TestNonFinite:
    """NaN в аргументе"""

    @pytest.mark.parametrize("name", ["sin", "cos", "tan", "sec", "cot", "csc"])
    def test_nan_imaginary_propagates(self, name: str) -> None:
        """NaN в мнимой части даёт NaN, а не ConjugateDomainError"""
        result = getattr(trig, name)(Complex(1.0, math.nan))
        assert not is_valid_number(result)

    def test_cosine_of_nan_imaginary(self) -> None:
        """cos(1+nan·i) = nan+nan·i"""
        result = trig.cos(Complex(1.0, math.nan))
        assert isinstance(result, Complex)
        assert math.isnan(result.re)
        assert math.isnan(result.im)
