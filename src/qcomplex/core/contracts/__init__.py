"""
Literal Contract Module

Текстовая граница библиотеки: парсинг и форматирование литералов "a+bi".
"""

from .literal import (
    LITERAL_PATTERN,
    ComplexParseError,
    format_complex,
    o,
    parse,
    parse_strict,
)

__all__ = [
    # Constants
    "LITERAL_PATTERN",
    # Exceptions
    "ComplexParseError",
    # Functions
    "parse",
    "parse_strict",
    "o",
    "format_complex",
]
