# qiish_args/cli/parent_parsers.py

"""
Parent parser definitions for CLI argument groups.

This module contains the parent parsers that define the argument groups of
the qiish-args command.
"""

from .common import LOG_LEVELS, OUTPUT_FORMATS, env_log_level, env_output_format
from .parser import TrackingArgumentParser


def create_cli_behaviors_parser():
    """Create parent parser for logging and tokenizer behavior arguments."""
    cli_behaviors_parent = TrackingArgumentParser(add_help=False)
    cli_behaviors_args = cli_behaviors_parent.add_argument_group("CLI Behavior")
    cli_behaviors_args.add_argument(
        "--log",
        help="Logging level (Default: WARNING). Overrides QIISH_ARGS_LOG env var.",
        choices=LOG_LEVELS,
        default=env_log_level(),
    )
    cli_behaviors_args.add_argument(
        "--log-file",
        help="Also write a detailed log to this file.",
        metavar="PATH",
    )
    cli_behaviors_args.add_argument(
        "--legacy",
        help="Use the original Qiish rules: quoted arguments are dropped and\n"
        "escapes resolve against a single fixed lookahead.",
        action="store_true",
        default=False,
    )
    return cli_behaviors_parent


def create_input_source_parser():
    """Create parent parser for input source arguments."""
    input_source_parent = TrackingArgumentParser(add_help=False)
    input_source_args = input_source_parent.add_argument_group(
        "Input Source (Default: interactive prompt on stdin)"
    )
    input_source_args.add_argument(
        "-c",
        "--command",
        help="Tokenize this single line and exit.",
        metavar="LINE",
    )
    input_source_args.add_argument(
        "--file",
        help="Tokenize every line of this text file.",
        metavar="PATH",
    )
    return input_source_parent


def create_output_parser():
    """Create parent parser for output arguments."""
    output_parent = TrackingArgumentParser(add_help=False)
    output_args = output_parent.add_argument_group("Output")
    output_args.add_argument(
        "--format",
        help="Output format (Default: text). Overrides QIISH_ARGS_FORMAT env var.",
        choices=sorted(OUTPUT_FORMATS),
        default=env_output_format(),
    )
    output_args.add_argument(
        "--show-config",
        help="Print the effective configuration to stderr before tokenizing.",
        action="store_true",
        default=False,
    )
    return output_parent


def create_common_parent_parsers():
    """Create all parent parsers used by the qiish-args command."""
    return {
        "cli_behaviors": create_cli_behaviors_parser(),
        "input_source": create_input_source_parser(),
        "output": create_output_parser(),
    }
