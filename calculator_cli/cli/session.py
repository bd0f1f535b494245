"""Interactive prompt sequence of the calculator."""
import sys
from typing import Any, TextIO

from pydantic import BaseModel, Field, field_validator

from calculator_cli.common.errors import DomainError
from calculator_cli.common.logger import logger
from calculator_cli.common.operations import OperationRequest
from calculator_cli.common.parser import OperandParser
from calculator_cli.core.calculator import Calculator

TITLE = "Calculator"
FIRST_PROMPT = "Enter first number: "
OPERATOR_PROMPT = "Enter operator (+, -, *, /): "
SECOND_PROMPT = "Enter second number: "
RESULT_PREFIX = "Result: "


class CalculatorSession(BaseModel):
    """
    One run of the calculator over a pair of text streams.

    Sequence:
        1. Print the title.
        2. Prompt for and parse the first operand.
        3. Prompt for the operator.
        4. Prompt for and parse the second operand.
        5. Print the result, or the message of the domain error that prevented it.

    Malformed operands and premature end of input are not handled here; they propagate
    to the caller as OperandParseError and EOFError.
    """

    stdin: Any = Field(default_factory=lambda: sys.stdin, description="Stream the answers are read from")
    stdout: Any = Field(default_factory=lambda: sys.stdout, description="Stream prompts and output are written to")

    @field_validator("stdin")
    def stdin_must_be_readable(cls, v: Any) -> TextIO:
        """Ensure that answers can be read line by line."""
        if not callable(getattr(v, "readline", None)):
            raise ValueError("stdin must provide readline()")
        return v

    @field_validator("stdout")
    def stdout_must_be_writable(cls, v: Any) -> TextIO:
        """Ensure that prompts can be written and flushed."""
        if not (callable(getattr(v, "write", None)) and callable(getattr(v, "flush", None))):
            raise ValueError("stdout must provide write() and flush()")
        return v

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _ask(self, prompt: str) -> str:
        """
        Write a prompt and read one answer line.

        :param str prompt: Prompt written without a trailing newline

        :return: Answer without its line terminator
        :rtype: str
        :raises EOFError: If the input stream is exhausted
        """
        self._write(prompt)
        line: str = self.stdin.readline()
        # readline() only returns "" once the stream is exhausted
        if not line:
            raise EOFError("Unexpected end of input")
        return OperandParser.strip_line_ending(line)

    def read_request(self) -> OperationRequest:
        """
        Prompt for both operands and the operator, in that fixed order.

        :return: The request built from the three answers
        :rtype: OperationRequest
        :raises OperandParseError: If an operand is not a valid number
        :raises EOFError: If input ends before all three answers were read
        """
        first: float = OperandParser.parse_operand(self._ask(FIRST_PROMPT))
        symbol: str = self._ask(OPERATOR_PROMPT)
        second: float = OperandParser.parse_operand(self._ask(SECOND_PROMPT))
        return OperationRequest(first=first, operator=symbol, second=second)

    def run(self) -> None:
        """
        Run the whole prompt sequence and print the outcome.

        :return: None
        """
        self._write(f"{TITLE}\n")
        request: OperationRequest = self.read_request()
        logger.info(f"📥 Read request: {request.first} {request.operator!r} {request.second}")

        try:
            outcome = Calculator.compute(request)
        except DomainError as exc:
            logger.info(f"🚫 No result: {exc.message}")
            self._write(f"{exc.message}\n")
            return

        self._write(f"{RESULT_PREFIX}{OperandParser.format_result(outcome.result)}\n")
