"""
Data models for the gcr_codec library.

This package contains the records a GCR message decodes into, and the
result types produced by the validator.
"""

from .message import (
    MessageType,
    GcrHeader,
    GcrFlightLine,
    GcrAirportSection,
    GcrFootnote,
    GcrMessage,
    GcrParseError,
    is_parse_error,
)
from .validation import ValidationError, ValidationResult, GcrCodecError

__all__ = [
    'MessageType',
    'GcrHeader',
    'GcrFlightLine',
    'GcrAirportSection',
    'GcrFootnote',
    'GcrMessage',
    'GcrParseError',
    'is_parse_error',
    'ValidationError',
    'ValidationResult',
    'GcrCodecError',
]
