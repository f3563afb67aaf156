"""Structured error codes for machine-readable error handling.

Error codes follow the format: {DOMAIN}-{CATEGORY}-{NUMBER}

Error Domains:
    CFG - Configuration errors (global settings and inline note config)
    NTE - Note block errors
    ANK - Anki errors (field mapping)

Usage:
    from anki_bridge.error_codes import ErrorCode

    logger.warning(
        "note_skipped",
        error_code=ErrorCode.CFG_NOTE_INVALID.value,
        field_path="tags",
    )
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes for machine-readable handling.

    All error codes inherit from str for JSON serialization compatibility.
    """

    # =========================================================================
    # Configuration Errors (CFG-xxx-xxx)
    # =========================================================================
    CFG_SETTINGS_PARSE = "CFG-SETTINGS-001"
    """Settings file is not valid YAML."""

    CFG_SETTINGS_INVALID = "CFG-SETTINGS-002"
    """Settings file parsed but holds invalid values."""

    CFG_NOTE_PARSE = "CFG-PARSE-001"
    """Inline note configuration is not well-formed YAML."""

    CFG_NOTE_INVALID = "CFG-INVALID-001"
    """Inline note configuration violates the schema."""

    # =========================================================================
    # Note Block Errors (NTE-xxx-xxx)
    # =========================================================================
    NTE_RESULT_INVALID = "NTE-RESULT-001"
    """Raw parse result from the document parser is malformed."""

    # =========================================================================
    # Anki Errors (ANK-xxx-xxx)
    # =========================================================================
    ANK_FIELD_MISSING = "ANK-FIELD-001"
    """Anki note lacks a field named by the note type settings."""
