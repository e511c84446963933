"""
GCR slot coordination message codec.

This package decodes, encodes and validates GCR messages, the line
oriented text format used to request, confirm, cancel or refuse airport
slots with a slot coordinator.

The main public API includes:
- decode: GCR text -> GcrMessage or GcrParseError
- encode: GcrMessage -> canonical GCR text
- validate: GcrMessage -> ValidationResult
- GcrCodec: the three operations bundled on one object

Example usage:
    from gcr_codec import decode, encode, is_parse_error

    result = decode(text)
    if is_parse_error(result):
        print(result)
    else:
        for flight in result.sorted_flights():
            print(flight)
"""

from gcr_codec.codec import GcrCodec, gcr_codec, decode, encode, validate
from gcr_codec.models import (
    MessageType,
    GcrHeader,
    GcrFlightLine,
    GcrAirportSection,
    GcrFootnote,
    GcrMessage,
    GcrParseError,
    is_parse_error,
    ValidationError,
    ValidationResult,
    GcrCodecError,
)

__version__ = '0.1.0'
__all__ = [
    # Entry points
    'decode',
    'encode',
    'validate',
    'GcrCodec',
    'gcr_codec',
    # Models
    'MessageType',
    'GcrHeader',
    'GcrFlightLine',
    'GcrAirportSection',
    'GcrFootnote',
    'GcrMessage',
    'GcrParseError',
    'is_parse_error',
    # Validation
    'ValidationError',
    'ValidationResult',
    'GcrCodecError',
]
