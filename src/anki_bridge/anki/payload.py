"""Build AnkiConnect request payloads from resolved notes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..blueprints.cloze import apply_cloze_replacements, effective_markers
from ..domain.entities.fields import NoteField
from ..domain.services.deck_resolver import resolve_deck
from ..domain.services.tag_resolver import resolve_tags
from .field_mapper import (
    RemoteNoteInfo,
    normalise_note_info_fields,
    to_remote_fields,
)

if TYPE_CHECKING:
    from ..config_settings import BridgeSettings
    from ..domain.entities.note import Note, NoteWithID
    from ..domain.interfaces.document_metadata import IDocumentMetadata


def anki_fields_for_note(note: Note, settings: BridgeSettings) -> dict[str, str]:
    """Anki field values for a note, with cloze markers expanded."""
    fields = dict(note.fields)
    if note.is_cloze:
        markers = effective_markers(note, settings)
        if markers and NoteField.FRONTLIKE in fields:
            fields[NoteField.FRONTLIKE] = apply_cloze_replacements(
                fields[NoteField.FRONTLIKE], markers
            )
    return to_remote_fields(fields, settings.names_pack(note.is_cloze))


def build_add_note_payload(
    note: Note,
    settings: BridgeSettings,
    metadata: IDocumentMetadata | None = None,
) -> dict[str, Any]:
    """Payload for AnkiConnect ``addNote``."""
    payload: dict[str, Any] = {
        "deckName": resolve_deck(note, settings),
        "modelName": note.get_model_name(settings),
        "fields": anki_fields_for_note(note, settings),
        "tags": resolve_tags(note, settings, metadata).to_list(),
        "options": {"allowDuplicate": False},
    }
    if note.medias:
        payload["picture"] = [media.to_payload() for media in note.medias]
    return payload


def build_update_note_payload(
    note: NoteWithID,
    settings: BridgeSettings,
    metadata: IDocumentMetadata | None = None,
) -> dict[str, Any]:
    """Payload for AnkiConnect ``updateNote`` (fields and tags)."""
    payload: dict[str, Any] = {
        "id": note.id,
        "fields": anki_fields_for_note(note, settings),
        "tags": resolve_tags(note, settings, metadata).to_list(),
    }
    if note.medias:
        payload["picture"] = [media.to_payload() for media in note.medias]
    return payload


def has_remote_conflict(
    note: Note, note_info: RemoteNoteInfo, settings: BridgeSettings
) -> bool:
    """True when the Anki copy's fields differ from what the note would send.

    Raises:
        MissingRemoteFieldError: If the Anki note lacks a configured field
    """
    remote = normalise_note_info_fields(note_info, settings)
    local = anki_fields_for_note(note, settings)
    names = settings.names_pack(note.is_cloze)
    return (
        remote[NoteField.FRONTLIKE] != local[names.field_names.front_like]
        or remote[NoteField.BACKLIKE] != local[names.field_names.back_like]
    )
