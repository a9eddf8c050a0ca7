"""
Legacy tokenizer for qiish-args.

This module reproduces the original Qiish argument parser exactly, including
its known gaps, so callers that depend on the old output can opt into it:

- Quoted arguments are scanned but never appended to the positional
  arguments. The opening token and the terminating token are dropped too.
- Escape resolution emits output only for backslashes, and every backslash is
  decoded against the second character of the whole string rather than its
  own successor.

The only deliberate difference is that a string too short to have a second
character passes its backslash through instead of crashing.
"""

import logging

from qiish_args.tokenizer.arg_parser import ParsedLine
from qiish_args.tokenizer.common import (
    DOUBLE_QUOTE,
    ESCAPE_CHAR,
    LONG_FLAG_PREFIX,
    SHORT_FLAG_PREFIX,
    SINGLE_QUOTE,
    decode_escape,
)

logger = logging.getLogger("qiish-args")

# Index of the character every backslash is decoded against.
LEGACY_LOOKAHEAD_INDEX = 1


def legacy_resolve_escapes(text: str) -> str:
    """
    Legacy escape resolution with a single fixed lookahead.

    Args:
        text: Raw token text

    Returns:
        str: One decoded character per backslash, all decoded from text[1]
    """
    resolved = []
    for char in text:
        if char != ESCAPE_CHAR:
            continue
        if len(text) <= LEGACY_LOOKAHEAD_INDEX:
            logger.debug(f"Legacy escape has no lookahead character in {text!r}")
            resolved.append(ESCAPE_CHAR)
            continue
        resolved.append(decode_escape(text[LEGACY_LOOKAHEAD_INDEX]))
    return "".join(resolved)


def _legacy_scan_quoted(tokens, quote: str, resolve: bool) -> str:
    assembled = ""
    for token in tokens:
        if quote in token:
            break
        assembled += legacy_resolve_escapes(token) if resolve else token
    return assembled


def legacy_tokenize(line: str) -> ParsedLine:
    """
    Tokenize a line with the original Qiish rules.

    Args:
        line: The raw input line

    Returns:
        ParsedLine: Positional arguments and flags; quoted spans are absent
    """
    result = ParsedLine()
    tokens = iter(line.split())
    for token in tokens:
        if token.startswith(SHORT_FLAG_PREFIX):
            if token.startswith(LONG_FLAG_PREFIX):
                result.flags.append(token[len(LONG_FLAG_PREFIX):])
            else:
                result.flags.extend(token[len(SHORT_FLAG_PREFIX):])
        elif token.startswith(DOUBLE_QUOTE):
            discarded = _legacy_scan_quoted(tokens, DOUBLE_QUOTE, resolve=True)
            logger.debug(f"Legacy mode discarded double-quoted span {discarded!r}")
        elif token.startswith(SINGLE_QUOTE):
            discarded = _legacy_scan_quoted(tokens, SINGLE_QUOTE, resolve=False)
            logger.debug(f"Legacy mode discarded single-quoted span {discarded!r}")
        else:
            result.args.append(token)
    return result
