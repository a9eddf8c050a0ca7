# qiish_args/cli/validators.py

import logging
import os
from argparse import Namespace

from qiish_args.exceptions import ConfigurationError, ValidationError

from .common import LOG_LEVELS, OUTPUT_FORMATS

logger = logging.getLogger("qiish-args")


def validate_parsed_args(args: Namespace) -> None:
    """
    Validate parsed command-line arguments.

    Args:
        args: Parsed arguments from argparse

    Raises:
        ValidationError: If the input options conflict or the file is missing
        ConfigurationError: If an environment default is not a valid choice
    """
    _validate_environment_defaults(args)
    _validate_input_source(args)


def _validate_environment_defaults(args: Namespace) -> None:
    """Reject invalid values that came in through environment variables."""
    # argparse does not check choices against defaults
    log_level = getattr(args, "log", None)
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level '{log_level}'. Choose from: {', '.join(LOG_LEVELS)}"
        )

    output_format = getattr(args, "format", None)
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"Invalid output format '{output_format}'. "
            f"Choose from: {', '.join(sorted(OUTPUT_FORMATS))}"
        )


def _validate_input_source(args: Namespace) -> None:
    """Validate that at most one input source is given and that it is usable."""
    command = getattr(args, "command", None)
    path = getattr(args, "file", None)

    if command is not None and path:
        raise ValidationError("--command and --file cannot be used together")

    if path is not None:
        if not path.strip():
            raise ValidationError("--file requires a non-empty path.")
        if not os.path.exists(path):
            raise ValidationError(f"Path does not exist: {path}")
        if not os.path.isfile(path):
            raise ValidationError(f"Path is not a file: {path}")
