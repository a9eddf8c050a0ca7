# qiish_args/tokenizer/common.py

import logging
from typing import Dict

logger = logging.getLogger("qiish-args")

# --- Token Prefixes ---
LONG_FLAG_PREFIX = "--"
SHORT_FLAG_PREFIX = "-"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

# --- Escape Sequences ---
ESCAPE_CHAR = "\\"

# A backtick keeps its backslash: "\`" stays two characters.
ESCAPE_SEQUENCES: Dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    "`": "\\`",
}


def decode_escape(following: str) -> str:
    """
    Decode the character that follows a backslash.

    Args:
        following: The single character after the backslash

    Returns:
        str: The decoded text; unknown characters are returned unchanged
    """
    return ESCAPE_SEQUENCES.get(following, following)
