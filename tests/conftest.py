"""Pytest configuration and fixtures for the test suite."""

from pathlib import Path

import pytest

from anki_bridge.config_settings import BridgeSettings, DeckMapping
from anki_bridge.domain.entities import Note, NoteField, SourceDescriptor
from anki_bridge.models import NoteConfig, ParseLocation, ParseLocationMarker
from tests.fixtures import StubDocumentMetadata


@pytest.fixture
def settings():
    """Default settings snapshot, isolated from the environment."""
    return BridgeSettings(_env_file=None)


@pytest.fixture
def location():
    """Location of a block starting on line 3."""
    return ParseLocation(
        start=ParseLocationMarker(offset=20, line=3, column=1),
        end=ParseLocationMarker(offset=80, line=9, column=4),
    )


@pytest.fixture
def make_note(location):
    """Factory for notes living in ``vocab/spanish/verbs.md``."""

    def _make_note(
        front: str | None = "hablar",
        back: str | None = "to speak",
        config: NoteConfig | None = None,
        note_id: int | None = None,
        is_cloze: bool = False,
        file: Path = Path("vocab/spanish/verbs.md"),
        source_text: str = "",
    ) -> Note:
        return Note(
            id=note_id,
            fields={NoteField.FRONTLIKE: front, NoteField.BACKLIKE: back},
            source=SourceDescriptor(file=file, location=location),
            source_text=source_text,
            config=config or NoteConfig(),
            is_cloze=is_cloze,
        )

    return _make_note


@pytest.fixture
def deck_settings():
    """Settings with nested folder to deck mappings."""
    return BridgeSettings(
        _env_file=None,
        default_deck_maps=[
            DeckMapping(folder="vocab", deck="Languages"),
            DeckMapping(folder="vocab/spanish", deck="Spanish"),
        ],
        fallback_deck="Inbox",
    )


@pytest.fixture
def stub_metadata():
    """Empty document metadata stub."""
    return StubDocumentMetadata()
