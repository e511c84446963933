"""
GCR codec entry points.

``decode``, ``encode`` and ``validate`` are pure functions of their argument:
they touch no shared mutable state and may be called concurrently.
"""

import logging
from typing import Union

from gcr_codec.encoders.gcr_encoder import GcrEncoder
from gcr_codec.models.message import GcrMessage, GcrParseError
from gcr_codec.models.validation import GcrCodecError, ValidationResult
from gcr_codec.parsers.gcr_parser import GcrParser
from gcr_codec.validation.validator import GcrValidator

logger = logging.getLogger(__name__)


class GcrCodec:
    """
    Facade over parser, encoder and validator.

    Example:
        codec = GcrCodec()
        result = codec.decode(text)
        if is_parse_error(result):
            print(result)
        else:
            print(codec.encode(result))
    """

    def decode(self, text: str) -> Union[GcrMessage, GcrParseError]:
        return GcrParser.parse(text)

    def encode(self, message: GcrMessage) -> str:
        return GcrEncoder.encode(message)

    def validate(self, message: GcrMessage) -> ValidationResult:
        return GcrValidator.validate(message)

    def decode_or_raise(self, text: str) -> GcrMessage:
        """
        Decode, raising GcrCodecError instead of returning a parse error.

        Raises:
            GcrCodecError: with the GcrParseError attached as ``parse_error``
        """
        result = self.decode(text)
        if isinstance(result, GcrParseError):
            raise GcrCodecError('Failed to decode GCR message', parse_error=result)
        return result

    def validate_or_raise(self, message: GcrMessage) -> ValidationResult:
        """
        Validate, raising GcrCodecError when any error is found.

        Returns:
            The (valid) ValidationResult, which may still carry warnings
        """
        result = self.validate(message)
        if not result.is_valid:
            raise GcrCodecError('GCR message failed validation', validation_result=result)
        for warning in result.warnings:
            logger.warning(warning)
        return result


gcr_codec = GcrCodec()


def decode(text: str) -> Union[GcrMessage, GcrParseError]:
    """Decode GCR text into a GcrMessage, or a GcrParseError on failure."""
    return gcr_codec.decode(text)


def encode(message: GcrMessage) -> str:
    """Encode a GcrMessage as canonical GCR text."""
    return gcr_codec.encode(message)


def validate(message: GcrMessage) -> ValidationResult:
    """Check every field of a GcrMessage, collecting all errors."""
    return gcr_codec.validate(message)
