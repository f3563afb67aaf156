"""Stub implementation of IDocumentMetadata for testing."""

from pathlib import Path

from anki_bridge.domain.interfaces.document_metadata import IDocumentMetadata


class StubDocumentMetadata(IDocumentMetadata):
    """Document metadata backed by an in-memory mapping.

    Documents missing from the mapping have no discoverable metadata.
    """

    def __init__(self, tags_by_file: dict[Path, list[str]] | None = None):
        self._tags_by_file = dict(tags_by_file or {})
        self.requests: list[Path] = []

    def get_tags(self, file_path: Path) -> list[str] | None:
        self.requests.append(file_path)
        return self._tags_by_file.get(file_path)
