"""Map generic note slots to Anki note type fields and back.

Every note kind exposes two generic slots (front-like and back-like). The
settings hold one names pack per kind that says which Anki note type to use
and what its two fields are called, e.g. ``Basic: Front/Back`` and
``Cloze: Text/Back Extra``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities.fields import NoteField
from ..error_codes import ErrorCode
from ..exceptions import MissingRemoteFieldError
from ..utils.logging import get_logger

if TYPE_CHECKING:
    from ..config_settings import BridgeSettings, NoteTypeNames
    from ..domain.entities.note import Note

logger = get_logger(__name__)


class RemoteFieldValue(BaseModel):
    """A field entry of an AnkiConnect ``notesInfo`` result."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    value: str
    order: int | None = None


class RemoteNoteInfo(BaseModel):
    """The parts of an AnkiConnect ``notesInfo`` entry the bridge reads."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    note_id: int | None = Field(default=None, alias="noteId")
    model_name: str = Field(alias="modelName")
    fields: dict[str, RemoteFieldValue]
    tags: list[str] = Field(default_factory=list)

    def field_values(self) -> dict[str, str]:
        return {name: field.value for name, field in self.fields.items()}


def to_remote_fields(
    fields: Mapping[NoteField, str], names: NoteTypeNames
) -> dict[str, str]:
    """Map generic slots onto Anki field names; missing slots become ``""``."""
    return {
        names.field_names.front_like: fields.get(NoteField.FRONTLIKE) or "",
        names.field_names.back_like: fields.get(NoteField.BACKLIKE) or "",
    }


def from_remote_fields(
    remote_fields: Mapping[str, str],
    names: NoteTypeNames,
    model_name: str | None = None,
) -> dict[NoteField, str]:
    """Map Anki field values back onto the generic slots.

    Raises:
        MissingRemoteFieldError: If a field named by ``names`` is absent
    """
    result: dict[NoteField, str] = {}
    for slot, field_name in (
        (NoteField.FRONTLIKE, names.field_names.front_like),
        (NoteField.BACKLIKE, names.field_names.back_like),
    ):
        if field_name not in remote_fields:
            logger.error(
                "remote_field_missing",
                field_name=field_name,
                model_name=model_name or names.note_type_name,
                available_fields=list(remote_fields),
            )
            raise MissingRemoteFieldError(
                field_name,
                model_name or names.note_type_name,
                available_fields=list(remote_fields),
                error_code=ErrorCode.ANK_FIELD_MISSING.value,
            )
        result[slot] = remote_fields[field_name]
    return result


def names_pack_for_model(model_name: str, settings: BridgeSettings) -> NoteTypeNames:
    """Pick the names pack for an Anki note type.

    Only the configured cloze note type name selects the cloze pack; every
    other model name is treated as basic.
    """
    is_cloze = model_name == settings.cloze_note_type_names.note_type_name
    return settings.names_pack(is_cloze)


def fields_to_anki_fields(note: Note, settings: BridgeSettings) -> dict[str, str]:
    """Outbound mapping for a note, using the names pack of its kind."""
    return to_remote_fields(note.fields, settings.names_pack(note.is_cloze))


def normalise_note_info_fields(
    note_info: RemoteNoteInfo, settings: BridgeSettings
) -> dict[NoteField, str]:
    """Inbound mapping for an Anki note, used to detect remote edits."""
    names = names_pack_for_model(note_info.model_name, settings)
    return from_remote_fields(
        note_info.field_values(), names, model_name=note_info.model_name
    )
