"""
Complex literal contract — текст "a+bi" ↔ значение

Парсинг принимает ровно одну форму:
    [sign]digits[.digits](+|-)digits[.digits]i
например "1+2i", "-3.1+5i", "2.3-1i". Без голой мнимой части ("3i"), без
пропущенной вещественной части, без exponent notation, без пробелов.
Цифры только ASCII (0-9).

Форматирование:
    re == 0 and im == 1 → "i"
    re == 0             → "{im}i"
    im > 0              → "{re}+{im}i"
    иначе               → "{re}{im}i"   (знак несёт im)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. format_complex никогда не выдаёт exponent notation для конечных значений
2. parse(format_complex(z)) == z для любого z с конечными компонентами и im != 0
"""

import logging
import math
import re
from decimal import Decimal
from typing import Final, Union

from qcomplex.core.domain.complex_value import Complex, Real

logger = logging.getLogger(__name__)

# [0-9] вместо \d: в Python 3 \d совпадает с любой Unicode-цифрой
LITERAL_PATTERN: Final[re.Pattern] = re.compile(
    r"([+-]?[0-9]+(?:\.[0-9]+)?)([+-][0-9]+(?:\.[0-9]+)?)i"
)


class ComplexParseError(ValueError):
    """Текст не соответствует форме complex literal."""

    pass


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse(text: str) -> Union[Complex, float, None]:
    """
    Парсинг complex literal.

    Args:
        text: Литерал, например "1+13i"

    Returns:
        Complex(re, im) при совпадении; вещественная часть (float), если im
        равна 0.0; None, если текст не соответствует форме литерала

    Examples:
        >>> parse("1+13i")
        Complex(re=1.0, im=13.0)
        >>> parse("2.3-1i")
        Complex(re=2.3, im=-1.0)
        >>> parse("4+0i")
        4.0
        >>> parse("42") is None
        True
    """
    match = LITERAL_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Not a complex literal: %r", text)
        return None

    re_part, im_part = float(match.group(1)), float(match.group(2))
    if im_part == 0.0:
        return re_part

    return Complex(re_part, im_part)


def parse_strict(text: str) -> Union[Complex, float]:
    """
    Парсинг complex literal с исключением при ошибке.

    Raises:
        ComplexParseError: Если текст не соответствует форме литерала
    """
    value = parse(text)
    if value is None:
        raise ComplexParseError(f"Invalid complex literal: {text!r}")

    return value


def o(text: str) -> Union[Complex, float]:
    """
    Краткая запись литерала: o("1+2i") это Complex(1.0, 2.0).

    Examples:
        >>> o("-3.1+5i")
        Complex(re=-3.1, im=5.0)
    """
    return parse_strict(text)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _render(x: Real) -> str:
    """
    Десятичная запись компоненты без exponent notation.

    repr(float) переходит на exponent notation ниже 1e-4 и от 1e16; парсер
    её не принимает. Decimal(repr(x)) сохраняет кратчайшее представление,
    формат "f" раскрывает порядок.

    Examples:
        >>> _render(1e-05)
        '0.00001'
        >>> _render(1.2345678901234567e19)
        '12345678901234567000'
        >>> _render(13.0)
        '13.0'
    """
    if isinstance(x, float) and not math.isfinite(x):
        return repr(x)

    return format(Decimal(repr(x)), "f")


def format_complex(z: Complex) -> str:
    """
    Представление Complex в виде литерала.

    Examples:
        >>> format_complex(Complex(0, 1))
        'i'
        >>> format_complex(Complex(0, -5))
        '-5i'
        >>> format_complex(Complex(1.0, 2.0))
        '1.0+2.0i'
        >>> format_complex(Complex(5.0, -7.0))
        '5.0-7.0i'
        >>> format_complex(Complex(1e-05, 1.0))
        '0.00001+1.0i'
    """
    if z.re == 0 and z.im == 1:
        return "i"

    if z.re == 0:
        return f"{_render(z.im)}i"

    if z.im > 0:
        return f"{_render(z.re)}+{_render(z.im)}i"

    return f"{_render(z.re)}{_render(z.im)}i"
