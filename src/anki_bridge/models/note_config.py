"""Inline note configuration schema.

A note block may start with a small YAML mapping that overrides how the note
is synced::

    id: 1699999999999
    deck: Spanish
    tags: [verbs, irregular]
    enabled: false

Every key is optional. Unknown keys are ignored so older versions keep
working with configuration written for newer ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from ..error_codes import ErrorCode
from ..exceptions import ConfigParseError, ConfigValidationError
from ..utils.logging import get_logger

if TYPE_CHECKING:
    from .parse_result import ParseNoteResult

logger = get_logger(__name__)


class NoteConfig(BaseModel):
    """Per-note overrides; ``None`` means the key was absent."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    deck: StrictStr | None = None
    tags: tuple[StrictStr, ...] | None = None
    delete: StrictBool | None = None
    enabled: StrictBool | None = None
    cloze: StrictBool | None = None
    cloze_replacements: tuple[StrictStr, ...] | None = Field(
        default=None, alias="clozeReplacements"
    )

    @field_validator("deck", mode="before")
    @classmethod
    def empty_deck_as_absent(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    def to_yaml_dict(self) -> dict[str, Any]:
        """Present keys only, user-facing names, lists instead of tuples."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {k: list(v) if isinstance(v, tuple) else v for k, v in data.items()}


class ParseConfig(NoteConfig):
    """Configuration as found in a document, including the Anki note id.

    ``id`` is ``None`` until Anki has created the note.
    """

    id: StrictInt | None = None

    @classmethod
    def from_result(cls, result: ParseNoteResult) -> ParseConfig:
        """Validate the configuration text of a raw parse result."""
        return validate_parse_config(result.config)

    def to_note_config(self) -> NoteConfig:
        return NoteConfig(**self.model_dump(exclude={"id"}))

    def to_yaml_dict(self) -> dict[str, Any]:
        data = super().to_yaml_dict()
        data.pop("id", None)
        if self.id is None:
            return data
        return {"id": self.id, **data}


def load_config_mapping(text: str | None) -> dict[str, Any]:
    """Parse configuration text into a mapping.

    Empty text, and YAML that is not a mapping, both yield ``{}``.

    Raises:
        ConfigParseError: If the text is not well-formed YAML
    """
    if not text or not text.strip():
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        context: dict[str, Any] = {}
        if mark is not None:
            context = {"line": mark.line + 1, "column": mark.column + 1}
        raise ConfigParseError(
            f"Note configuration is not valid YAML: {e}",
            suggestion="Check indentation, colons and quotes in the note's config block",
            error_code=ErrorCode.CFG_NOTE_PARSE.value,
            context=context,
        ) from e

    if not data:
        return {}
    if not isinstance(data, dict):
        logger.debug("note_config_not_a_mapping", value_type=type(data).__name__)
        return {}
    return data


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _document_keys(model: type[NoteConfig], data: dict[str, Any]) -> dict[str, Any]:
    """Drop Python attribute names that are spelled differently in documents."""
    renamed = {
        name
        for name, info in model.model_fields.items()
        if info.alias is not None and info.alias != name
    }
    return {key: value for key, value in data.items() if key not in renamed}


def _validate(model: type[NoteConfig], text: str | None) -> Any:
    data = _document_keys(model, load_config_mapping(text))
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = [(_format_loc(err["loc"]), err["msg"]) for err in e.errors()]
        field_path, reason = errors[0]
        raise ConfigValidationError(
            f"Invalid value for '{field_path}' in note configuration: {reason}",
            field_path=field_path,
            errors=errors,
            error_code=ErrorCode.CFG_NOTE_INVALID.value,
        ) from e


def validate_note_config(text: str | None) -> NoteConfig:
    """Validate inline configuration text into a NoteConfig.

    Raises:
        ConfigParseError: If the text is not well-formed YAML
        ConfigValidationError: If a known key has a value of the wrong type
    """
    return _validate(NoteConfig, text)


def validate_parse_config(text: str | None) -> ParseConfig:
    """Validate inline configuration text into a ParseConfig (with ``id``).

    Raises:
        ConfigParseError: If the text is not well-formed YAML
        ConfigValidationError: If a known key has a value of the wrong type
    """
    return _validate(ParseConfig, text)
