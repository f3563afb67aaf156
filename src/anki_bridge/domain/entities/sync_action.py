"""Domain entity describing what a sync pass does with one note."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .note import Note


class SyncActionType(Enum):
    """Enumeration of possible sync action types."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    SKIP = "skip"


@dataclass(frozen=True)
class SyncAction:
    """Domain entity representing a sync action."""

    action_type: SyncActionType
    note: Note
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate action invariants."""
        if not isinstance(self.action_type, SyncActionType):
            raise ValueError("Invalid action type")
        if self.action_type in (SyncActionType.UPDATE, SyncActionType.DELETE):
            if self.note.id is None:
                raise ValueError(f"{self.action_type.value} requires a note with an id")

    @property
    def is_create(self) -> bool:
        return self.action_type == SyncActionType.CREATE

    @property
    def is_update(self) -> bool:
        return self.action_type == SyncActionType.UPDATE

    @property
    def is_delete(self) -> bool:
        return self.action_type == SyncActionType.DELETE

    @property
    def is_skip(self) -> bool:
        return self.action_type == SyncActionType.SKIP
