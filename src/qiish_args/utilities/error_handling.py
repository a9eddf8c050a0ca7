"""
Error handling utilities for qiish-args handlers.
"""

import argparse
import functools
import logging
import sys
from typing import Callable

from qiish_args.exceptions import (
    ConfigurationError,
    FileSystemError,
    QiishArgsError,
    ValidationError,
)

logger = logging.getLogger("qiish-args")

EXPECTED_ERRORS = (ConfigurationError, FileSystemError, ValidationError)


def handler_error_wrapper(handler_func: Callable) -> Callable:
    """
    Decorator that wraps handler functions with standardized error handling.

    Expected errors are reported and re-raised. Anything else is wrapped in a
    QiishArgsError so main() can map it to an exit code.

    Args:
        handler_func: The handler function to wrap

    Returns:
        The wrapped handler function
    """

    @functools.wraps(handler_func)
    def wrapper(params, *args, **kwargs):
        handler_name = handler_func.__name__
        try:
            logger.debug(f"Starting {handler_name}")
            return handler_func(params, *args, **kwargs)

        except EXPECTED_ERRORS as e:
            logger.debug(f"Expected error in {handler_name}: {type(e).__name__}: {e.message}")
            format_and_print_error(e, params)
            raise

        except Exception as e:
            logger.error(f"Unexpected error in {handler_name}: {e}", exc_info=True)
            agent_error = QiishArgsError(
                f"Failed to tokenize input: {e}",
                details={"error": str(e), "handler": handler_name},
            )
            format_and_print_error(agent_error, params)
            raise agent_error from e

    return wrapper


def format_and_print_error(error: Exception, params: argparse.Namespace) -> None:
    """
    Print a short, user-facing description of an error to stderr.

    Args:
        error: The exception that occurred
        params: Command line parameters
    """
    error_message = getattr(error, "message", str(error))

    if isinstance(error, FileSystemError):
        print(f"\nCould not read input file: {error_message}", file=sys.stderr)
        print(f"   File: {getattr(params, 'file', 'Unknown')}", file=sys.stderr)
    elif isinstance(error, (ValidationError, ConfigurationError)):
        print(f"\nInvalid options: {error_message}", file=sys.stderr)
    else:
        print(f"\nError: {error_message}", file=sys.stderr)

    if getattr(params, "log", "WARNING") == "DEBUG":
        details = getattr(error, "details", {})
        if details:
            print(f"   Details: {details}", file=sys.stderr)
