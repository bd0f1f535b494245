"""Test class Calculator."""
import pytest

from calculator_cli.common.errors import DivisionByZeroError, DomainError, InvalidOperatorError
from calculator_cli.common.operations import OperationRequest
from calculator_cli.core.calculator import Calculator


@pytest.mark.parametrize(
    "first,operator,second,expected",
    [
        (10.0, "+", 5.0, 15.0),
        (10.0, "-", 5.0, 5.0),
        (5.0, "-", 10.0, -5.0),
        (6.0, "*", 7.0, 42.0),
        (7.0, "/", 2.0, 3.5),
        (-9.0, "/", 3.0, -3.0),
        (0.0, "/", 5.0, 0.0),
        (0.1, "+", 0.2, 0.1 + 0.2),
    ],
)
def test_compute_valid(first: float, operator: str, second: float, expected: float) -> None:
    """Compute returns the arithmetic result for each supported operator."""
    outcome = Calculator.compute(OperationRequest(first=first, operator=operator, second=second))
    assert outcome.result == expected
    assert outcome.request.operator == operator


@pytest.mark.parametrize("first", [7.0, 0.0, -3.0])
@pytest.mark.parametrize("zero", [0.0, -0.0])
def test_compute_division_by_zero(first: float, zero: float) -> None:
    """Dividing by zero raises DivisionByZeroError, whatever the sign of the zero."""
    with pytest.raises(DivisionByZeroError) as exc_info:
        Calculator.compute(OperationRequest(first=first, operator="/", second=zero))
    assert exc_info.value.message == "Error: Division by zero"


def test_division_by_zero_is_zero_division_error() -> None:
    """DivisionByZeroError can be caught as the builtin ZeroDivisionError."""
    with pytest.raises(ZeroDivisionError):
        Calculator.compute(OperationRequest(first=1.0, operator="/", second=0.0))


@pytest.mark.parametrize("operator", ["+", "-", "*"])
def test_zero_second_operand_is_fine_for_other_operators(operator: str) -> None:
    """A zero second operand only matters for division."""
    outcome = Calculator.compute(OperationRequest(first=3.0, operator=operator, second=0.0))
    assert outcome.result in (3.0, 0.0)


@pytest.mark.parametrize("operator", ["%", "", "x", "//", " +"])
def test_compute_invalid_operator(operator: str) -> None:
    """Unknown operators raise InvalidOperatorError with the fixed message."""
    with pytest.raises(InvalidOperatorError) as exc_info:
        Calculator.compute(OperationRequest(first=4.0, operator=operator, second=2.0))
    assert str(exc_info.value) == "Invalid operator"
    assert exc_info.value.operator == operator


def test_invalid_operator_checked_before_division_by_zero() -> None:
    """An unknown operator is reported even when the second operand is zero."""
    with pytest.raises(InvalidOperatorError):
        Calculator.compute(OperationRequest(first=4.0, operator="%", second=0.0))


def test_domain_errors_share_base_class() -> None:
    """Both anticipated conditions are DomainError subclasses."""
    assert issubclass(DivisionByZeroError, DomainError)
    assert issubclass(InvalidOperatorError, DomainError)
