"""
Configuration display utilities for qiish-args.

Prints the effective startup configuration to stderr so that stdout carries
only tokenizer output.
"""

import sys
from typing import Any


def print_configuration(params: Any, stream=None) -> None:
    """
    Print a configuration summary, split into user-provided and default values.

    Args:
        params: Parsed command line parameters
        stream: Where to write (default: sys.stderr)
    """
    out = stream if stream is not None else sys.stderr
    user_provided: set = getattr(params, "_user_provided", set())

    user_params = {}
    default_params = {}
    for k, v in vars(params).items():
        if k == "_user_provided":
            continue
        if k in user_provided:
            user_params[k] = v
        else:
            default_params[k] = v

    print("--- qiish-args Configuration ---", file=out)

    if user_params:
        print("\nUser-Provided Parameters:", file=out)
        for k, v in sorted(user_params.items()):
            print(f"  {k:<15} = {v}", file=out)

    if default_params:
        print("\nDefault Parameters:", file=out)
        for k, v in sorted(default_params.items()):
            print(f"  {k:<15} = {v}", file=out)

    print("--------------------------------", file=out)
