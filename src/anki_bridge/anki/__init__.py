"""Anki-facing mapping: field names and AnkiConnect payloads."""
