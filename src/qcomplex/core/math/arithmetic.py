"""
Arithmetic Dispatch — полиморфные +, -, *, /, ** над Real | Complex

Каждая публичная операция определяет вид операндов в runtime, выбирает
формулу из таблицы диспетчеризации и пропускает сырой результат через
normalize() ровно один раз.

ТАБЛИЦА ДИСПЕТЧЕРИЗАЦИИ:
    Real, Real        → нативная арифметика Python
    Real a, Complex z → a+z, a-z, a·z, a·conj(z)/|z|², a^z
    Complex z, Real b → покомпонентные +, -, ·, /; z^b повторным умножением
                        (int b) или по формуле Муавра (иной b)
    Complex, Complex  → покомпонентные +, -; (ac-bd, ad+bc); z1·conj(z2)/|z2|²;
                        z1^z2 = e^(ln(r)·z2 + iθ·z2), (r, θ) = to_polar(z1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат с im == 0 возвращается как обычное вещественное число
2. Промежуточные подвыражения не нормализуются, только итоговый результат
3. Float domain effects (ZeroDivisionError, math domain errors, inf/NaN)
   пропагируют без изменений
4. Операнды, не являющиеся Real или Complex, вызывают TypeError
"""

import logging
import math
from enum import Enum

from qcomplex.core.domain.complex_value import Complex, Number, Real, normalize
from qcomplex.core.math.config import (
    DEFAULT_CONFIG,
    ArithmeticConfig,
    NegativeBaseBranch,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Бинарный арифметический оператор"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "**"


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class ConjugateDomainError(ValueError):
    """
    Сопряжение запрошено для Complex с нулевой мнимой частью.

    Нормализованная арифметика такое значение не возвращает; оно возникает
    только из явно сконструированного Complex(re, 0).
    """

    pass


# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def coerce_number(value: object) -> Number:
    """
    Проверка операнда и приведение к домену Real | Complex.

    Args:
        value: Операнд арифметической операции

    Returns:
        Сам value для int, float и Complex; встроенный complex
        преобразуется в Complex(value.real, value.imag)

    Raises:
        TypeError: Для bool и любого нечислового типа

    Examples:
        >>> coerce_number(2)
        2
        >>> coerce_number(3 + 4j)
        Complex(re=3.0, im=4.0)
    """
    if isinstance(value, Complex):
        return value

    if isinstance(value, bool):
        raise TypeError("bool is not a real or complex number")

    if isinstance(value, (int, float)):
        return value

    if isinstance(value, complex):
        return Complex(value.real, value.imag)

    raise TypeError(f"Expected a real or complex number, got {type(value).__name__}")


# =============================================================================
# СЫРАЯ ДИСПЕТЧЕРИЗАЦИЯ (без нормализации)
# =============================================================================


def _real_real(a: Real, b: Real, op: Operator) -> Number:
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUB:
        return a - b
    if op is Operator.MUL:
        return a * b
    if op is Operator.DIV:
        return a / b

    # Отрицательное основание с дробным показателем даёт встроенный complex
    return coerce_number(a**b)


def _real_complex(a: Real, z: Complex, op: Operator, config: ArithmeticConfig) -> Number:
    if op is Operator.ADD:
        return Complex(a + z.re, z.im)
    if op is Operator.SUB:
        # a - z = a + (-z): мнимая часть меняет знак
        return Complex(a - z.re, -z.im)
    if op is Operator.MUL:
        return Complex(a * z.re, a * z.im)
    if op is Operator.DIV:
        # a / z = a·conj(z) / |z|²
        modulus_sq = z.re**2 + z.im**2
        return Complex(a * z.re / modulus_sq, -a * z.im / modulus_sq)

    return _real_power(a, z, config)


def _complex_real(z: Complex, b: Real, op: Operator, config: ArithmeticConfig) -> Number:
    if op is Operator.ADD:
        return Complex(z.re + b, z.im)
    if op is Operator.SUB:
        return Complex(z.re - b, z.im)
    if op is Operator.MUL:
        return Complex(z.re * b, z.im * b)
    if op is Operator.DIV:
        return Complex(z.re / b, z.im / b)

    if isinstance(b, int):
        return _integer_power(z, b, config)

    from qcomplex.core.math.polar import polar_power

    return polar_power(z, b, config=config)


def _complex_complex(
    z1: Complex, z2: Complex, op: Operator, config: ArithmeticConfig
) -> Number:
    if op is Operator.ADD:
        return Complex(z1.re + z2.re, z1.im + z2.im)
    if op is Operator.SUB:
        return Complex(z1.re - z2.re, z1.im - z2.im)
    if op is Operator.MUL:
        return Complex(
            z1.re * z2.re - z1.im * z2.im,
            z1.re * z2.im + z1.im * z2.re,
        )
    if op is Operator.DIV:
        modulus_sq = z2.re**2 + z2.im**2
        return Complex(
            (z1.re * z2.re + z1.im * z2.im) / modulus_sq,
            (z1.im * z2.re - z1.re * z2.im) / modulus_sq,
        )

    from qcomplex.core.math.polar import to_polar

    r, theta = to_polar(z1, config=config)
    return _exp_power(r, theta, z2, config)


def apply_raw(a: Number, b: Number, op: Operator, config: ArithmeticConfig) -> Number:
    """Диспетчеризация уже приведённых операндов без нормализации результата."""
    if isinstance(a, Complex):
        if isinstance(b, Complex):
            return _complex_complex(a, b, op, config)
        return _complex_real(a, b, op, config)

    if isinstance(b, Complex):
        return _real_complex(a, b, op, config)

    return _real_real(a, b, op)


# =============================================================================
# СТЕПЕНИ
# =============================================================================


def _integer_power(z: Complex, n: int, config: ArithmeticConfig) -> Number:
    """z^n повторным умножением; z^-n = 1 / z^n; z^0 = 1."""
    if n == 0:
        return 1

    result: Number = 1
    for _ in range(abs(n)):
        result = apply_raw(result, z, Operator.MUL, config)

    if n < 0:
        return apply_raw(1, result, Operator.DIV, config)

    return result


def _exp_power(r: float, theta: float, w: Complex, config: ArithmeticConfig) -> Number:
    """(r·e^(iθ))^w = e^(ln(r)·w + iθ·w)"""
    exponent = apply_raw(
        apply_raw(math.log(r), w, Operator.MUL, config),
        apply_raw(Complex(0, theta), w, Operator.MUL, config),
        Operator.ADD,
        config,
    )
    return apply_raw(math.e, exponent, Operator.POW, config)


def _real_power(a: Real, z: Complex, config: ArithmeticConfig) -> Number:
    """a^z = a^re · (cos(im·ln|a|) + i·sin(im·ln|a|))"""
    if a < 0 and config.negative_base is NegativeBaseBranch.PRINCIPAL:
        return _exp_power(abs(a), math.pi, z, config)

    log_a = math.log(abs(a))
    scale = coerce_number(a**z.re)
    rotation = Complex(math.cos(z.im * log_a), math.sin(z.im * log_a))
    return apply_raw(scale, rotation, Operator.MUL, config)


# =============================================================================
# ПУБЛИЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def apply(
    a: Number,
    b: Number,
    op: Operator | str,
    *,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> Number:
    """
    Применение бинарного оператора к двум операндам Real | Complex.

    Args:
        a: Левый операнд
        b: Правый операнд
        op: Operator или его символ ("+", "-", "*", "/", "**")
        config: Конфигурация арифметики (default: DEFAULT_CONFIG)

    Returns:
        Нормализованный результат: Real, если мнимая часть ровно ноль,
        иначе Complex

    Raises:
        TypeError: Если операнд не Real и не Complex
        ValueError: Если op не является известным символом оператора

    Examples:
        >>> apply(Complex(1, 2), Complex(0, 1), "*")
        Complex(re=-2, im=1)
        >>> apply(Complex(1, 2), Complex(1, -2), Operator.MUL)
        5
        >>> apply(2, 3, "**")
        8
    """
    op = Operator(op)
    return normalize(apply_raw(coerce_number(a), coerce_number(b), op, config))


def add(a: Number, b: Number, *, config: ArithmeticConfig = DEFAULT_CONFIG) -> Number:
    """a + b"""
    return apply(a, b, Operator.ADD, config=config)


def subtract(a: Number, b: Number, *, config: ArithmeticConfig = DEFAULT_CONFIG) -> Number:
    """
    a - b

    Для вещественного a и комплексного z результат (a - z.re, -z.im), то есть
    a + (-z). Исторически эта ветка возвращала (a - z.re, z.im), сохраняя
    знак мнимой части; такое поведение не является вычитанием и заменено.

    Examples:
        >>> subtract(5, Complex(2, 3))
        Complex(re=3, im=-3)
    """
    return apply(a, b, Operator.SUB, config=config)


def multiply(a: Number, b: Number, *, config: ArithmeticConfig = DEFAULT_CONFIG) -> Number:
    """a * b"""
    return apply(a, b, Operator.MUL, config=config)


def divide(a: Number, b: Number, *, config: ArithmeticConfig = DEFAULT_CONFIG) -> Number:
    """a / b"""
    return apply(a, b, Operator.DIV, config=config)


def power(a: Number, b: Number, *, config: ArithmeticConfig = DEFAULT_CONFIG) -> Number:
    """
    a ** b

    Комплексное основание с int показателем: повторное умножение; иной
    вещественный показатель: формула Муавра; комплексный показатель:
    экспоненциальная форма.

    Examples:
        >>> power(Complex(0, 1), 2)
        -1
    """
    return apply(a, b, Operator.POW, config=config)


def negate(a: Number) -> Number:
    """-a, вычисляется как a * (-1), поэтому результат нормализован."""
    return apply(a, -1, Operator.MUL)


def conj(z: Complex) -> Complex:
    """
    Комплексное сопряжение.

    NaN в мнимой части не является нулём: результат Complex(re, nan),
    NaN пропагирует дальше как любой float domain effect.

    Args:
        z: Complex с ненулевой мнимой частью

    Returns:
        Complex(z.re, -z.im)

    Raises:
        ConjugateDomainError: Если z.im == 0
        TypeError: Если z не комплексное

    Examples:
        >>> conj(Complex(5.0, 7.0))
        Complex(re=5.0, im=-7.0)
        >>> conj(Complex(5.0, -7.0))
        Complex(re=5.0, im=7.0)
    """
    z = coerce_number(z)
    if not isinstance(z, Complex):
        raise TypeError(f"Conjugate expects a complex number, got {type(z).__name__}")

    if z.im == 0:
        logger.debug("Conjugate rejected for %r", z)
        raise ConjugateDomainError(f"Conjugate is undefined for imaginary part {z.im!r}: {z!r}")

    return Complex(z.re, -z.im)


def absolute(a: Number) -> Real:
    """
    Модуль (absolute value).

    Real → abs(a); Complex → sqrt(z · conj(z)). Complex с im == 0 сначала
    нормализуется и идёт по ветке Real.

    Examples:
        >>> absolute(-3)
        3
        >>> absolute(Complex(3.0, 4.0))
        5.0
    """
    a = normalize(coerce_number(a))
    if isinstance(a, Complex):
        # z·conj(z) = re² + im², мнимая часть сокращается точно
        product = apply_raw(a, conj(a), Operator.MUL, DEFAULT_CONFIG)
        return math.sqrt(product.re)

    return abs(a)
