"""
qiish-args - argument tokenizer for the Quantii shell (Qiish)
"""

__version__ = "0.1.0"

from .tokenizer import ArgParser, ParsedLine, resolve_escapes, tokenize
