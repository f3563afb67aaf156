"""Decide what a sync pass does with a note.

Per note, across sync passes::

    Unsynced (id=None) --create--> Synced (id=k) --update--> Synced
                                   Synced --delete: true--> Deleted

A note without an id that is marked for deletion has nothing to delete.
"""

from __future__ import annotations

from ..entities.note import Note, has_id
from ..entities.sync_action import SyncAction, SyncActionType


def plan_sync_action(note: Note) -> SyncAction:
    """Return the action for one note."""
    if not note.get_enabled():
        return SyncAction(SyncActionType.SKIP, note, reason="disabled")

    if note.config.delete:
        if has_id(note):
            return SyncAction(SyncActionType.DELETE, note)
        return SyncAction(SyncActionType.SKIP, note, reason="delete_without_id")

    if has_id(note):
        return SyncAction(SyncActionType.UPDATE, note)
    return SyncAction(SyncActionType.CREATE, note)
