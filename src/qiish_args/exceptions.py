"""
Custom exceptions for qiish-args.

The tokenizer itself never raises on malformed input; these errors belong to
strict escape resolution and to the inspection CLI around the tokenizer.
"""

from typing import Any, Dict, Optional


class QiishArgsError(Exception):
    """Base class for all qiish-args errors."""

    def __init__(
        self,
        message: str = "",
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(QiishArgsError):
    """Raised when command line options fail validation."""


class ConfigurationError(QiishArgsError):
    """Raised when the runtime configuration is unusable."""


class FileSystemError(QiishArgsError):
    """Raised when an input file cannot be read."""


class MalformedEscapeError(QiishArgsError):
    """Raised by strict escape resolution when a backslash has no successor."""
