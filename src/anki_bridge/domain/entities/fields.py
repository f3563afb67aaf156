"""Generic note slots and note kinds."""

from enum import Enum


class NoteField(str, Enum):
    """The two canonical content slots every note kind maps onto."""

    FRONTLIKE = "Frontlike"
    BACKLIKE = "Backlike"


class NoteKind(str, Enum):
    """Closed set of renderable note kinds."""

    BASIC = "basic"
    CLOZE = "cloze"

    @classmethod
    def for_note(cls, is_cloze: bool) -> "NoteKind":
        return cls.CLOZE if is_cloze else cls.BASIC
