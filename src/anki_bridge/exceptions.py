"""Centralized exception hierarchy for anki-bridge.

All custom exceptions inherit from AnkiBridgeError, making it easy to catch
every bridge-related error with a single except clause.

Exception Hierarchy:
    AnkiBridgeError (base)
     ConfigurationError - Global settings loading/validation errors
     ValidationError - Note block validation errors
        ConfigParseError - Inline note configuration is not well-formed YAML
        ConfigValidationError - Inline note configuration violates the schema
        ParseResultError - Raw parse result handed over by the parser is malformed
     AnkiError - Anki-related errors
        FieldMappingError - Field mapping errors
           MissingRemoteFieldError - Expected field absent from a remote note

Usage Examples:
    try:
        config = validate_parse_config(block.config)
    except ValidationError as e:
        logger.warning("note_skipped", **e.to_dict())
"""

from typing import Any


class AnkiBridgeError(Exception):
    """Base exception for all bridge errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging (e.g., field paths, model names)
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.message = message
        self.suggestion = suggestion
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with error code and suggestion if available."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}] {self.message}")
        else:
            parts.append(self.message)
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary with error details
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


# Configuration Errors


class ConfigurationError(AnkiBridgeError):
    """Global settings loading or validation errors.

    Raised when:
    - Settings file is missing or malformed
    - Settings values fail validation
    - Environment variables are invalid
    """


# Validation Errors


class ValidationError(AnkiBridgeError):
    """Note block validation errors.

    Base class for everything that makes a single note unsyncable. Callers
    skip the offending note and continue with its siblings.
    """


class ConfigParseError(ValidationError):
    """Inline note configuration is not well-formed structured data.

    Raised when:
    - The YAML inside a note block has a syntax error
    """


class ConfigValidationError(ValidationError):
    """Inline note configuration parses but violates the schema.

    Raised when:
    - A known key holds a value of the wrong type (e.g. ``tags: notalist``)

    Attributes:
        field_path: Dotted path of the first offending field (e.g. ``tags.1``)
        errors: Every violation as ``(field_path, reason)`` pairs
    """

    def __init__(
        self,
        message: str,
        field_path: str,
        errors: list[tuple[str, str]] | None = None,
        suggestion: str | None = None,
        error_code: str | None = None,
    ):
        self.field_path = field_path
        self.errors = errors or [(field_path, message)]
        super().__init__(
            message,
            suggestion=suggestion,
            error_code=error_code,
            context={"field_path": field_path, "errors": self.errors},
        )


class ParseResultError(ValidationError):
    """Raw parse result handed over by the document parser is malformed.

    Raised when:
    - A required key (type, config, front, back, location) is missing
    - Location markers are not integers
    """


# Anki Errors


class AnkiError(AnkiBridgeError):
    """Base class for Anki-related errors."""


class FieldMappingError(AnkiError):
    """Field mapping errors.

    Raised when:
    - Generic note fields cannot be mapped onto an Anki note type
    - Anki note fields cannot be mapped back onto generic fields
    """


class MissingRemoteFieldError(FieldMappingError):
    """An Anki note lacks a field the configured note type names require.

    This means the local note type settings and the Anki collection disagree,
    so the value is never silently defaulted.
    """

    def __init__(
        self,
        field_name: str,
        model_name: str,
        available_fields: list[str] | None = None,
        error_code: str | None = None,
    ):
        self.field_name = field_name
        self.model_name = model_name
        self.available_fields = available_fields or []
        super().__init__(
            f"Anki note of type '{model_name}' has no field '{field_name}'",
            suggestion=(
                "Check that the note type field names in your settings match "
                f"the fields in Anki: {self.available_fields}"
            ),
            error_code=error_code,
            context={
                "field_name": field_name,
                "model_name": model_name,
                "available_fields": self.available_fields,
            },
        )
