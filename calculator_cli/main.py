"""
Main entrypoint of the interactive calculator.

This script:
- Parses the optional diagnostics flags
- Runs one calculator session on stdin/stdout
- Turns fatal input errors into an error message and a non-zero exit status

Exit status:
- 0 after a result, a division-by-zero message or an invalid-operator message
- 1 when an operand is not a number or input ends early
- 2 when command-line arguments are invalid
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ValidationError

from calculator_cli.cli.session import CalculatorSession
from calculator_cli.common.errors import OperandParseError
from calculator_cli.common.logger import configure_logging, logger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    log_level : LogLevel
        Level of the diagnostics written to stderr.
    """

    log_level: LogLevel = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Interactive calculator: reads two numbers and an operator, prints the result"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Diagnostics level written to stderr (default: WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one calculator session and return the process exit status.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    try:
        CalculatorSession().run()
    except OperandParseError as exc:
        logger.info(f"🔢❌ Aborting: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except EOFError as exc:
        logger.info(f"⌨️❌ Aborting: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
