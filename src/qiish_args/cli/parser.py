# qiish_args/cli/parser.py

import argparse
import logging
from argparse import RawTextHelpFormatter
from typing import List, Optional

from qiish_args import __version__


def _mark_user_provided(namespace, dest: str) -> None:
    if not hasattr(namespace, "_user_provided"):
        namespace._user_provided = set()
    namespace._user_provided.add(dest)


class UserProvidedAction(argparse.Action):
    """
    Custom argparse Action that tracks which arguments were explicitly provided by the user.
    """

    def __call__(self, parser, namespace, values, option_string=None):
        _mark_user_provided(namespace, self.dest)
        setattr(namespace, self.dest, values)


class UserProvidedStoreTrueAction(argparse._StoreTrueAction):
    """Custom action for store_true that tracks user-provided arguments."""

    def __call__(self, parser, namespace, values, option_string=None):
        _mark_user_provided(namespace, self.dest)
        super().__call__(parser, namespace, values, option_string)


def _tracking_action(kwargs: dict) -> dict:
    if kwargs.get("action") == "store_true":
        kwargs["action"] = UserProvidedStoreTrueAction
    elif "action" not in kwargs or kwargs.get("action") == "store":
        kwargs["action"] = UserProvidedAction
    return kwargs


class TrackingArgumentGroup(argparse._ArgumentGroup):
    """
    Custom ArgumentGroup that automatically tracks user-provided arguments.
    """

    def add_argument(self, *args, **kwargs):
        return super().add_argument(*args, **_tracking_action(kwargs))


class TrackingArgumentParser(argparse.ArgumentParser):
    """
    Custom ArgumentParser that automatically tracks user-provided arguments.
    """

    def add_argument(self, *args, **kwargs):
        return super().add_argument(*args, **_tracking_action(kwargs))

    def add_argument_group(self, *args, **kwargs):
        group = TrackingArgumentGroup(self, *args, **kwargs)
        self._action_groups.append(group)
        return group


logger = logging.getLogger("qiish-args")


def parse_cmdline_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse the qiish-args command line.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        argparse.Namespace: Parsed and validated arguments

    Raises:
        ValidationError: If validation fails
    """
    # Import here to avoid circular imports
    from .parent_parsers import create_common_parent_parsers
    from .validators import validate_parsed_args

    parent_parsers = create_common_parent_parsers()

    parser = TrackingArgumentParser(
        prog="qiish-args",
        description="Qiish argument tokenizer - split shell lines into arguments and flags",
        formatter_class=RawTextHelpFormatter,
        parents=[
            parent_parsers["cli_behaviors"],
            parent_parsers["input_source"],
            parent_parsers["output"],
        ],
        epilog="""
Environment Variables:
  QIISH_ARGS_LOG     : Default logging level
  QIISH_ARGS_FORMAT  : Default output format (text or json)

Example Usage:
  # Tokenize a single line
  qiish-args -c "ls -la --color /tmp"

  # Tokenize every line of a file as JSON
  qiish-args --file history.txt --format json

  # Interactive prompt using the original Qiish rules
  qiish-args --legacy
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    validate_parsed_args(args)

    return args
