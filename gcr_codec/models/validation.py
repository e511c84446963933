"""
Validation results for GCR messages.

This module provides the result types returned by the validator, plus the
exception used by callers that prefer raising over inspecting results.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Any


@dataclass
class ValidationError:
    """Represents a single validation error."""

    field: str
    message: str
    line: Optional[int] = None

    def to_dict(self) -> dict:
        return {'field': self.field, 'message': self.message, 'line': self.line}

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.field}: {self.message} (line {self.line})"
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def valid(self) -> bool:
        return self.is_valid

    @property
    def has_warnings(self) -> bool:
        """Check if validation has warnings."""
        return len(self.warnings) > 0

    def add_error(self, field: str, message: str, line: Optional[int] = None) -> None:
        """Add a validation error."""
        self.errors.append(ValidationError(field, message, line))

    def add_warning(self, message: str) -> None:
        """Add a validation warning."""
        self.warnings.append(message)

    def errors_for(self, field: str) -> List[ValidationError]:
        """Errors tagged with exactly this field path."""
        return [error for error in self.errors if error.field == field]

    @classmethod
    def success(cls) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(errors=[])

    def to_dict(self) -> dict:
        return {
            'valid': self.is_valid,
            'errors': [error.to_dict() for error in self.errors],
            'warnings': list(self.warnings),
        }

    def __str__(self) -> str:
        if self.is_valid:
            if self.has_warnings:
                return f"Valid (with {len(self.warnings)} warnings)"
            return "Valid"
        return f"Invalid ({len(self.errors)} errors)"

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]


class GcrCodecError(Exception):
    """Exception raised when a GCR message cannot be decoded or fails validation."""

    def __init__(self, message: str, parse_error: Any = None, validation_result: Optional[ValidationResult] = None):
        """
        Initialize codec error.

        Args:
            message: Error message
            parse_error: Optional GcrParseError from a failed decode
            validation_result: Optional ValidationResult with details
        """
        super().__init__(message)
        self.parse_error = parse_error
        self.validation_result = validation_result

    def __str__(self) -> str:
        if self.validation_result:
            error_messages = "\n  - ".join(self.validation_result.get_error_messages())
            return f"{super().__str__()}\nErrors:\n  - {error_messages}"
        if self.parse_error is not None:
            return f"{super().__str__()}: {self.parse_error}"
        return super().__str__()
