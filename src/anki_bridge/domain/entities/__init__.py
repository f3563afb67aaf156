"""Domain entities package."""

from .fields import NoteField, NoteKind
from .note import Note, NoteWithID, SourceDescriptor, has_id
from .sync_action import SyncAction, SyncActionType

__all__ = [
    "Note",
    "NoteField",
    "NoteKind",
    "NoteWithID",
    "SourceDescriptor",
    "SyncAction",
    "SyncActionType",
    "has_id",
]
