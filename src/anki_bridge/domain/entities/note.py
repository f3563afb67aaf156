"""Domain entity for a note block embedded in a document."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeGuard

from ...models.media import Media
from ...models.note_config import NoteConfig
from ...models.parse_result import ParseLocation
from .fields import NoteField, NoteKind

if TYPE_CHECKING:
    from ...config_settings import BridgeSettings


@dataclass(frozen=True)
class SourceDescriptor:
    """Where a note came from; used for lookups, never for identity."""

    file: Path
    location: ParseLocation | None = None

    @property
    def folder(self) -> Path:
        return self.file.parent

    @property
    def line(self) -> int | None:
        """1-based line of the block start, when known."""
        if self.location is None:
            return None
        return self.location.start.line


@dataclass(frozen=True)
class Note:
    """Structured representation of one note block.

    A Note is rebuilt every time its document is parsed and is never mutated;
    state transitions (such as receiving an Anki id) produce a new instance.
    """

    id: int | None
    fields: Mapping[NoteField, str]
    source: SourceDescriptor
    source_text: str
    config: NoteConfig = field(default_factory=NoteConfig)
    medias: tuple[Media, ...] = ()
    is_cloze: bool = False

    def __post_init__(self) -> None:
        fields = {
            NoteField(key): value
            for key, value in self.fields.items()
            if value is not None
        }
        object.__setattr__(self, "fields", MappingProxyType(fields))
        object.__setattr__(self, "medias", tuple(self.medias))

    @property
    def kind(self) -> NoteKind:
        return NoteKind.for_note(self.is_cloze)

    @property
    def front(self) -> str:
        return self.fields.get(NoteField.FRONTLIKE, "")

    @property
    def back(self) -> str:
        return self.fields.get(NoteField.BACKLIKE, "")

    def get_enabled(self) -> bool:
        """Only an explicit ``enabled: false`` disables a note."""
        return self.config.enabled is None or self.config.enabled

    def render_as_text(self) -> str:
        from ...blueprints import render_note

        return render_note(self)

    def should_update_file(self) -> bool:
        """Whether the document text of this note is stale.

        Disabled notes are left untouched whatever their text looks like.
        """
        return self.get_enabled() and self.render_as_text() != self.source_text

    def get_model_name(self, settings: BridgeSettings) -> str:
        return settings.names_pack(self.is_cloze).note_type_name

    def config_for_text(self) -> dict[str, Any]:
        """The inline configuration as written back into the document.

        ``id`` always comes from the note itself.
        """
        data = self.config.to_yaml_dict()
        data.pop("id", None)
        if self.id is None:
            return data
        return {"id": self.id, **data}

    def with_id(self, note_id: int) -> Note:
        """Create a new Note bound to the Anki note ``note_id``."""
        return dataclasses.replace(self, id=note_id)


if TYPE_CHECKING:

    class NoteWithID(Note):
        id: int

else:
    NoteWithID = Note


def has_id(note: Note) -> TypeGuard[NoteWithID]:
    """True when Anki already knows the note."""
    return note.id is not None
