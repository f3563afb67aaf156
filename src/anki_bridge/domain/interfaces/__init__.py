"""Ports the domain services depend on."""

from .document_metadata import IDocumentMetadata

__all__ = ["IDocumentMetadata"]
