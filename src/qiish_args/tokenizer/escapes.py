# qiish_args/tokenizer/escapes.py

import logging

from qiish_args.exceptions import MalformedEscapeError

from .common import ESCAPE_CHAR, decode_escape

logger = logging.getLogger("qiish-args")


def resolve_escapes(text: str, strict: bool = False) -> str:
    """
    Resolve backslash escape sequences in a string.

    Each backslash is decoded against the character immediately after it:
    \\n, \\t and \\r become control characters, \\\\ becomes one backslash,
    \\` stays as backslash plus backtick, and any other character is kept
    with its backslash dropped.

    Args:
        text: Raw text as typed inside a double-quoted argument
        strict: Raise instead of passing a trailing backslash through

    Returns:
        str: The resolved text

    Raises:
        MalformedEscapeError: If strict and the text ends in a lone backslash
    """
    resolved = []
    chars = iter(text)
    for char in chars:
        if char != ESCAPE_CHAR:
            resolved.append(char)
            continue

        following = next(chars, None)
        if following is None:
            if strict:
                raise MalformedEscapeError(
                    f"Dangling escape character at end of: {text!r}",
                    code="dangling_escape",
                    details={"text": text},
                )
            logger.debug(f"Passing dangling escape through unresolved in {text!r}")
            resolved.append(ESCAPE_CHAR)
            continue

        resolved.append(decode_escape(following))

    return "".join(resolved)
