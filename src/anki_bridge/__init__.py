"""Resolve and synchronize flashcard notes embedded in Obsidian documents with Anki."""

__version__ = "0.1.0"
