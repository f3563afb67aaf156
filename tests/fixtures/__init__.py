"""Test fixtures package."""

from .stub_document_metadata import StubDocumentMetadata

__all__ = ["StubDocumentMetadata"]
