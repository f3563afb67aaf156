"""Validated data models for note blocks."""

from .media import Media
from .note_config import (
    NoteConfig,
    ParseConfig,
    load_config_mapping,
    validate_note_config,
    validate_parse_config,
)
from .parse_result import (
    ParseLineResult,
    ParseLocation,
    ParseLocationMarker,
    ParseNoteResult,
)

__all__ = [
    "Media",
    "NoteConfig",
    "ParseConfig",
    "ParseLineResult",
    "ParseLocation",
    "ParseLocationMarker",
    "ParseNoteResult",
    "load_config_mapping",
    "validate_note_config",
    "validate_parse_config",
]
