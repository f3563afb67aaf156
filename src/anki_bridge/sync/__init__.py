"""Per-document note building."""

from .note_builder import NoteBuildReport, NoteFailure, build_note, build_notes

__all__ = ["NoteBuildReport", "NoteFailure", "build_note", "build_notes"]
