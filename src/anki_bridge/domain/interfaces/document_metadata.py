"""Interface for document metadata lookups."""

from abc import ABC, abstractmethod
from pathlib import Path


class IDocumentMetadata(ABC):
    """Interface for reading metadata of the documents notes live in.

    Implementations may compute the metadata lazily and cache it; callers
    only ever ask for one document at a time.
    """

    @abstractmethod
    def get_tags(self, file_path: Path) -> list[str] | None:
        """Return every tag attached to a document.

        Tags are returned as written, so they may carry a leading ``#`` and
        use ``/`` for hierarchy.

        Args:
            file_path: Document to inspect

        Returns:
            Raw tags (front-matter and inline), or None when the document has
            no discoverable metadata
        """
        pass
