"""Compute the result of a single arithmetic operation."""
from calculator_cli.common.errors import DivisionByZeroError
from calculator_cli.common.logger import logger
from calculator_cli.common.operations import OperationRequest, OperationResult
from calculator_cli.common.parser import OperandParser


class Calculator:
    """
    Evaluate one operation: two operands joined by one operator.

    Supported operators: + - * /
    Only one operator per request; there is no precedence or grouping to handle.
    """

    @staticmethod
    def compute(request: OperationRequest) -> OperationResult:
        """
        Dispatch on the request operator and compute the result.

        :param OperationRequest request: Operands and operator read from the user

        :return: The computed result
        :rtype: OperationResult
        :raises InvalidOperatorError: If the operator is not one of + - * /
        :raises DivisionByZeroError: If the operator is "/" and the second operand is zero
        """
        operator_fn = OperandParser.lookup_operator(request.operator)

        if request.operator == "/" and request.second == 0:
            logger.info(f"➗❌ Refusing to divide {request.first} by zero")
            raise DivisionByZeroError()

        result: float = operator_fn(request.first, request.second)
        logger.debug(f"🧮✅ {request.first} {request.operator} {request.second} = {result}")
        return OperationResult(request=request, result=result)
