# qiish_args/cli/__init__.py

"""
CLI module for qiish-args.

This module provides command-line argument parsing and validation functionality.
"""

from .common import (
    MODE_COMMAND,
    MODE_FILE,
    MODE_INTERACTIVE,
    input_mode,
)
from .parser import parse_cmdline_args
from .validators import validate_parsed_args

__all__ = [
    "parse_cmdline_args",
    "validate_parsed_args",
    "input_mode",
    "MODE_COMMAND",
    "MODE_FILE",
    "MODE_INTERACTIVE",
]
