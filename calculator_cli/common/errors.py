"""Exceptions raised while reading operands and computing results."""


class CalculatorError(Exception):
    """Base class for every calculator failure."""


class OperandParseError(CalculatorError, ValueError):
    """Raised when operand text is not a valid number. Fatal for the run."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid number: {text!r}")


class DomainError(CalculatorError):
    """
    Anticipated condition that prevents a result from being computed.

    The session prints ``message`` as-is and the process still exits successfully.
    """

    message: str = ""

    def __str__(self) -> str:
        return self.message


class DivisionByZeroError(DomainError, ZeroDivisionError):
    message = "Error: Division by zero"


class InvalidOperatorError(DomainError, ValueError):
    message = "Invalid operator"

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(operator)
