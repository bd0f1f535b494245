"""Parse operands and operators typed by the user, and format results."""
import math
import operator
from typing import Callable, Dict, Tuple

from calculator_cli.common.errors import InvalidOperatorError, OperandParseError


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

# Mapping of supported operator symbols to their functions
OPERATORS: Dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

# Results are printed as plain decimals while the decimal point position lies in
# (MIN_DECIMAL_POINT, MAX_DECIMAL_POINT], i.e. for magnitudes in [1e-6, 1e21)
MIN_DECIMAL_POINT = -6
MAX_DECIMAL_POINT = 21


class OperandParser:
    """
    Convert raw input lines into typed values.

    Design constraints:
        - No eval(), no dynamic code execution
        - Operator text is matched exactly: " +" or "++" are not "+"
    """

    @staticmethod
    def strip_line_ending(line: str) -> str:
        """
        Remove the trailing line terminator from a line read from a text stream.

        Only "\\n" and "\\r\\n" are removed; other whitespace is kept.

        :param str line: Raw line as returned by ``readline()``

        :return: Line without its terminator
        :rtype: str
        """
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    @staticmethod
    def parse_operand(text: str) -> float:
        """
        Parse operand text as a floating-point number.

        Accepts surrounding whitespace, exponents, ``inf`` and ``nan``.
        Digit-group underscores and non-ASCII digits are rejected even though
        ``float()`` would take them.

        :param str text: Operand as typed by the user

        :return: Parsed number
        :rtype: float
        :raises OperandParseError: If the text is not a valid number
        """
        stripped = text.strip()
        if "_" in stripped or not stripped.isascii():
            raise OperandParseError(text)
        try:
            return float(stripped)
        except ValueError as exc:
            raise OperandParseError(text) from exc

    @staticmethod
    def lookup_operator(symbol: str) -> OperatorFn:
        """
        Return the function bound to an operator symbol.

        :param str symbol: Operator symbol

        :return: Binary operator function
        :rtype: OperatorFn
        :raises InvalidOperatorError: If the symbol is not one of + - * /
        """
        try:
            return OPERATORS[symbol]
        except KeyError:
            raise InvalidOperatorError(symbol) from None

    @staticmethod
    def _shortest_digits(value: float) -> Tuple[str, int]:
        """
        Split a positive finite float into its shortest round-trip digits and decimal point position.

        The value equals ``0.<digits> * 10 ** point``; digits carry no leading or trailing zeros.

        :param float value: Positive, finite, non-zero value

        :return: Tuple of (digits, point)
        :rtype: Tuple[str, int]
        """
        mantissa, _, exponent = repr(value).partition("e")
        whole, _, fraction = mantissa.partition(".")
        digits: str = whole + fraction
        point: int = len(whole) + int(exponent or 0)

        # Leading zeros move the point left, trailing zeros are dropped
        stripped = digits.lstrip("0")
        point -= len(digits) - len(stripped)
        return stripped.rstrip("0"), point

    @staticmethod
    def format_result(value: float) -> str:
        """
        Format a computed value the way it is printed after "Result: ".

        Rules:
            - Whole numbers keep a ".0" suffix: "15.0", "10000000000000000.0"
            - Plain decimals for magnitudes from 1e-6 up to (excluding) 1e21
            - Exponent notation without zero padding otherwise: "1e-7", "1.5e+300"
            - "Infinity", "-Infinity" and "NaN" for non-finite values

        :param float value: Computed value

        :return: Formatted value
        :rtype: str
        """
        value = float(value)
        if math.isnan(value):
            return "NaN"
        sign: str = "-" if math.copysign(1.0, value) < 0 else ""
        if math.isinf(value):
            return f"{sign}Infinity"
        if value == 0:
            return f"{sign}0.0"

        digits, point = OperandParser._shortest_digits(abs(value))
        count: int = len(digits)

        if count <= point <= MAX_DECIMAL_POINT:
            # Whole number
            return f"{sign}{digits}{'0' * (point - count)}.0"
        if 0 < point <= MAX_DECIMAL_POINT:
            return f"{sign}{digits[:point]}.{digits[point:]}"
        if MIN_DECIMAL_POINT < point <= 0:
            return f"{sign}0.{'0' * -point}{digits}"

        exponent: int = point - 1
        exponent_text: str = f"e+{exponent}" if exponent >= 0 else f"e{exponent}"
        if count == 1:
            return f"{sign}{digits}{exponent_text}"
        return f"{sign}{digits[0]}.{digits[1:]}{exponent_text}"
