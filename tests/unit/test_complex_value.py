"""
Тесты для типа Complex

Проверяет:
1. Неизменяемость и структурное равенство/хеширование
2. Конструктор мнимой единицы и предикаты вида
3. normalize
4. Операторы делегируют в Arithmetic Dispatch (включая отражённые формы)
"""

import dataclasses

import pytest

from qcomplex import Complex, ib, is_complex, is_real, normalize
from qcomplex.core.math.numerical_safeguards import is_close


class TestValueSemantics:
    """Неизменяемость, равенство, хеширование"""

    def test_frozen(self) -> None:
        """Компоненты нельзя переприсвоить"""
        z = Complex(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            z.re = 3.0

    def test_structural_equality(self) -> None:
        """Равные компоненты → равные значения"""
        assert Complex(1, 2) == Complex(1.0, 2.0)
        assert Complex(1, 2) != Complex(2, 1)

    def test_hashable(self) -> None:
        """Равные значения имеют одинаковый hash"""
        assert hash(Complex(1, 2)) == hash(Complex(1.0, 2.0))
        assert len({Complex(1, 2), Complex(1.0, 2.0), Complex(0, 1)}) == 2


class TestImaginaryUnit:
    """Тесты для ib"""

    def test_default(self) -> None:
        """ib() = 0+1i"""
        assert ib() == Complex(0, 1)

    def test_scaled(self) -> None:
        """ib(-5) = 0-5i"""
        assert ib(-5) == Complex(0, -5)

    def test_not_a_singleton(self) -> None:
        """Каждый вызов создаёт новое значение"""
        assert ib() is not ib()


class TestPredicates:
    """Тесты для is_complex / is_real"""

    def test_is_complex(self) -> None:
        """Только экземпляры Complex"""
        assert is_complex(Complex(1, 2))
        assert not is_complex(1.0)
        assert not is_complex(1 + 2j)

    def test_is_real(self) -> None:
        """int и float, но не bool"""
        assert is_real(3)
        assert is_real(-2.5)
        assert not is_real(True)
        assert not is_real(Complex(1, 0))
        assert not is_real("1")


class TestNormalize:
    """Тесты для normalize"""

    def test_zero_imaginary_collapses(self) -> None:
        """Complex(3, 0) → 3"""
        assert normalize(Complex(3.0, 0.0)) == 3.0
        assert not isinstance(normalize(Complex(3.0, 0.0)), Complex)

    def test_negative_zero_imaginary_collapses(self) -> None:
        """-0.0 это ноль"""
        assert normalize(Complex(3.0, -0.0)) == 3.0

    def test_non_zero_imaginary_kept(self) -> None:
        """Complex(3, 1) без изменений"""
        z = Complex(3.0, 1.0)
        assert normalize(z) is z

    def test_real_unchanged(self) -> None:
        """Вещественные проходят без изменений"""
        assert normalize(7) == 7


class TestOperatorSugar:
    """Операторы Python на Complex"""

    def test_forward_operators(self) -> None:
        """z op вещественное"""
        z = Complex(1, 2)
        assert z + 1 == Complex(2, 2)
        assert z - 1 == Complex(0, 2)
        assert z * 2 == Complex(2, 4)
        assert z / 2 == Complex(0.5, 1.0)

    def test_reflected_operators(self) -> None:
        """вещественное op z"""
        z = Complex(1, 2)
        assert 1 + z == Complex(2, 2)
        assert 1 - z == Complex(0, -2)
        assert 2 * z == Complex(2, 4)
        assert 5 / Complex(1, 2) == Complex(1.0, -2.0)

    def test_power_operators(self) -> None:
        """z ** n и a ** z"""
        assert ib() ** 2 == -1
        assert is_close(2 ** Complex(1.0, 0.0), 2.0)

    def test_unary(self) -> None:
        """-z, abs(z), z.conjugate()"""
        z = Complex(3.0, -4.0)
        assert -z == Complex(-3.0, 4.0)
        assert abs(z) == 5.0
        assert z.conjugate() == Complex(3.0, 4.0)

    def test_builtin_complex_operand(self) -> None:
        """Python complex совместим с Complex"""
        assert Complex(1, 1) * 1j == Complex(-1.0, 1.0)
