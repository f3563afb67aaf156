"""Renderers for the closed set of note kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.entities.fields import NoteKind
from .base import NoteRenderer
from .basic import BasicRenderer
from .cloze import ClozeRenderer, apply_cloze_replacements, has_cloze_syntax

if TYPE_CHECKING:
    from ..domain.entities.note import Note

RENDERERS: dict[NoteKind, NoteRenderer] = {
    NoteKind.BASIC: BasicRenderer(),
    NoteKind.CLOZE: ClozeRenderer(),
}


def render_note(note: Note) -> str:
    """Render a note back into its document text form."""
    return RENDERERS[note.kind].render_as_text(note)


__all__ = [
    "RENDERERS",
    "BasicRenderer",
    "ClozeRenderer",
    "NoteRenderer",
    "apply_cloze_replacements",
    "has_cloze_syntax",
    "render_note",
]
