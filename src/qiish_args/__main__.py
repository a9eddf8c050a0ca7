#!/usr/bin/env python3

"""
Module entry point for qiish-args.

This allows the package to be executed as:
    python -m qiish_args -c "ls -la --color /tmp"
"""

import sys

from qiish_args.main import main

if __name__ == "__main__":
    sys.exit(main())
