# qiish_args/tokenizer/arg_parser.py

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from .common import (
    DOUBLE_QUOTE,
    LONG_FLAG_PREFIX,
    SHORT_FLAG_PREFIX,
    SINGLE_QUOTE,
)
from .escapes import resolve_escapes

logger = logging.getLogger("qiish-args")


@dataclass
class ParsedLine:
    """Positional arguments and flags of one input line, in order of appearance."""

    args: List[str] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"args": list(self.args), "flags": list(self.flags)}


def _scan_quoted(
    opening: str,
    tokens: Iterator[str],
    quote: str,
    transform: Optional[Callable[[str], str]],
) -> str:
    """
    Collect a quoted span that may cover several whitespace-delimited tokens.

    The span starts after the opening quote and ends at the first piece
    containing the same quote. Only text inside the quotes is transformed;
    text after the closing quote stays attached verbatim. Pieces are joined
    with a single space.
    """
    if transform is None:
        transform = str

    pieces = []
    piece: Optional[str] = opening[len(quote):]
    while piece is not None:
        end = piece.find(quote)
        if end != -1:
            pieces.append(transform(piece[:end]) + piece[end + len(quote):])
            break
        pieces.append(transform(piece))
        piece = next(tokens, None)
    else:
        logger.debug(f"Unterminated {quote} quote, keeping {len(pieces)} collected piece(s)")

    return " ".join(pieces)


def tokenize(line: str, legacy: bool = False) -> ParsedLine:
    """
    Split a command line into positional arguments and flags.

    Tokens are whitespace-delimited and classified left to right:
    '--name' is one long flag, '-abc' is one flag per character,
    a token opening with a double or single quote starts a quoted argument
    (escapes resolved only inside double quotes), anything else is a
    positional argument. Never raises on malformed input.

    Args:
        line: The raw input line
        legacy: Reproduce the original Qiish behaviour, which drops quoted
            arguments and resolves escapes with a single fixed lookahead

    Returns:
        ParsedLine: The ordered positional arguments and flags
    """
    if legacy:
        from qiish_args.legacy import legacy_tokenize

        return legacy_tokenize(line)

    result = ParsedLine()
    tokens = iter(line.split())
    for token in tokens:
        if token.startswith(LONG_FLAG_PREFIX):
            result.flags.append(token[len(LONG_FLAG_PREFIX):])
        elif token.startswith(SHORT_FLAG_PREFIX):
            result.flags.extend(token[len(SHORT_FLAG_PREFIX):])
        elif token.startswith(DOUBLE_QUOTE):
            result.args.append(_scan_quoted(token, tokens, DOUBLE_QUOTE, resolve_escapes))
        elif token.startswith(SINGLE_QUOTE):
            result.args.append(_scan_quoted(token, tokens, SINGLE_QUOTE, None))
        else:
            result.args.append(token)

    logger.debug(f"Tokenized {line!r}: args={result.args} flags={result.flags}")
    return result


class ArgParser:
    """
    Stateful argument parser for one Qiish command line.

    Attributes:
        args (list): Positional arguments, filled by parse()
        flags (list): Short and long flags, filled by parse()
    """

    def __init__(self, line: str, legacy: bool = False):
        """
        Initialize ArgParser.

        Args:
            line: The raw command line to parse
            legacy: Use the original Qiish tokenizer behaviour
        """
        self._line = line
        self.legacy = legacy
        self.args: List[str] = []
        self.flags: List[str] = []

    @property
    def line(self) -> str:
        return self._line

    def parse(self) -> None:
        """
        Parse the stored line into args and flags.

        Outputs are reset first, so parsing twice gives the same result.
        """
        result = tokenize(self._line, legacy=self.legacy)
        self.args = result.args
        self.flags = result.flags

    def result(self) -> ParsedLine:
        return ParsedLine(args=list(self.args), flags=list(self.flags))

    def __repr__(self) -> str:
        return f"ArgParser(line={self._line!r}, args={self.args!r}, flags={self.flags!r})"
