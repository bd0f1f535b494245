"""Shared logger for the calculator CLI."""
import logging
import sys

LOGGER_NAME = "calculator_cli"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a stderr handler to the shared logger and set its level.

    Stdout is reserved for prompts and results, so diagnostics never go there.
    Calling this again replaces the previous handler instead of stacking a new one.

    :param str level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    :return: The configured shared logger
    :rtype: logging.Logger
    """
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # Keep records away from the root logger's handlers
    logger.propagate = False
    return logger
