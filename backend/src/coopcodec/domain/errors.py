"""
Exceptions raised by identifier generators and payload builders.

Validators and formatters never raise; malformed input there is expressed
as a ``False`` result or an unchanged string.
"""

from typing import Any


class CodecError(ValueError):
    """Base exception for all coopcodec errors."""
    
    code = "codec_error"
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidPrefixError(CodecError):
    """OGM prefix is not exactly three decimal digits."""
    code = "invalid_prefix"


class InvalidSequenceError(CodecError):
    """OGM sequence does not fit in seven decimal digits."""
    code = "invalid_sequence"


class MalformedOgmError(CodecError):
    """A stored OGM code cannot be decomposed into its parts."""
    code = "malformed_ogm"


class InvalidAmountError(CodecError):
    """Payment amount is not a finite decimal number."""
    code = "invalid_amount"
