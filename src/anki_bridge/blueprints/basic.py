"""Basic question/answer notes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.entities.fields import NoteKind
from .base import NoteRenderer

if TYPE_CHECKING:
    from ..domain.entities.note import Note


class BasicRenderer(NoteRenderer):
    kind = NoteKind.BASIC

    def sections(self, note: Note) -> list[str]:
        return [note.front, note.back]
