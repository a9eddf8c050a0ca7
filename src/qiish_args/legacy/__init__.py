"""
Legacy behaviour of the original Qiish argument parser.

Kept separate from the modern tokenizer so the two can evolve independently.
"""

from .legacy_tokenizer import (
    LEGACY_LOOKAHEAD_INDEX,
    legacy_resolve_escapes,
    legacy_tokenize,
)

__all__ = [
    "legacy_tokenize",
    "legacy_resolve_escapes",
    "LEGACY_LOOKAHEAD_INDEX",
]
