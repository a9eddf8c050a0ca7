# qiish_args/tokenizer/__init__.py

"""
Tokenizer module for qiish-args.

This module turns a raw Qiish command line into positional arguments and flags.
"""

from .arg_parser import ArgParser, ParsedLine, tokenize
from .common import ESCAPE_SEQUENCES, decode_escape
from .escapes import resolve_escapes

__all__ = [
    "ArgParser",
    "ParsedLine",
    "tokenize",
    "resolve_escapes",
    "decode_escape",
    "ESCAPE_SEQUENCES",
]
