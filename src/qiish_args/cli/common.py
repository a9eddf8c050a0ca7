# qiish_args/cli/common.py

import logging
import os
from typing import Set

logger = logging.getLogger("qiish-args")

# --- Shared Constants ---
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
OUTPUT_FORMATS: Set[str] = {"text", "json"}

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT_FORMAT = "text"

# --- Environment Variables ---
ENV_LOG_LEVEL = "QIISH_ARGS_LOG"
ENV_OUTPUT_FORMAT = "QIISH_ARGS_FORMAT"

# --- Input Modes ---
MODE_COMMAND = "command"
MODE_FILE = "file"
MODE_INTERACTIVE = "interactive"


def env_log_level() -> str:
    """Default log level, taken from QIISH_ARGS_LOG when set."""
    return (os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def env_output_format() -> str:
    """Default output format, taken from QIISH_ARGS_FORMAT when set."""
    return (os.getenv(ENV_OUTPUT_FORMAT) or DEFAULT_OUTPUT_FORMAT).lower()


def input_mode(args) -> str:
    """
    Work out where input lines come from.

    Args:
        args: Parsed command line arguments

    Returns:
        str: One of MODE_COMMAND, MODE_FILE or MODE_INTERACTIVE
    """
    if getattr(args, "command", None) is not None:
        return MODE_COMMAND
    if getattr(args, "file", None):
        return MODE_FILE
    return MODE_INTERACTIVE
