"""Tests for deck resolution."""

from pathlib import Path

from anki_bridge.config_settings import BridgeSettings, DeckMapping
from anki_bridge.domain.services.deck_resolver import (
    default_deck_for_folder,
    resolve_deck,
)
from anki_bridge.models import NoteConfig, validate_note_config


class TestResolveDeck:
    """Config deck -> folder mapping -> fallback."""

    def test_config_deck_wins_over_folder_mapping(self, deck_settings, make_note) -> None:
        note = make_note(config=NoteConfig(deck="Override"))

        assert resolve_deck(note, deck_settings) == "Override"

    def test_deepest_folder_mapping(self, deck_settings, make_note) -> None:
        note = make_note(file=Path("vocab/spanish/verbs.md"))

        assert resolve_deck(note, deck_settings) == "Spanish"

    def test_ancestor_mapping_applies_to_subfolders(self, deck_settings, make_note) -> None:
        note = make_note(file=Path("vocab/french/irregular/etre.md"))

        assert resolve_deck(note, deck_settings) == "Languages"

    def test_fallback_when_nothing_matches(self, deck_settings, make_note) -> None:
        note = make_note(file=Path("maths/algebra.md"))

        assert resolve_deck(note, deck_settings) == "Inbox"

    def test_empty_config_and_no_mapping_uses_fallback(self, make_note) -> None:
        settings = BridgeSettings(_env_file=None, fallback_deck="Default")
        note = make_note(config=validate_note_config(""))

        assert resolve_deck(note, settings) == "Default"

    def test_empty_deck_string_falls_through(self, deck_settings, make_note) -> None:
        note = make_note(config=NoteConfig(deck=""))

        assert resolve_deck(note, deck_settings) == "Spanish"

    def test_similar_folder_prefix_does_not_match(self, deck_settings, make_note) -> None:
        note = make_note(file=Path("vocabulary/words.md"))

        assert resolve_deck(note, deck_settings) == "Inbox"

    def test_absolute_path_relative_to_vault(self, make_note) -> None:
        settings = BridgeSettings(
            _env_file=None,
            vault_path=Path("/home/me/vault"),
            default_deck_maps=[DeckMapping(folder="vocab/spanish", deck="Spanish")],
        )
        note = make_note(file=Path("/home/me/vault/vocab/spanish/verbs.md"))

        assert resolve_deck(note, settings) == "Spanish"


class TestDefaultDeckForFolder:
    """Folder mapping lookup."""

    def test_root_mapping_matches_everything(self) -> None:
        maps = [DeckMapping(folder="/", deck="Vault")]

        assert default_deck_for_folder(Path("a/b"), maps) == "Vault"
        assert default_deck_for_folder(Path("."), maps) == "Vault"

    def test_slashes_are_normalised(self) -> None:
        maps = [DeckMapping(folder="/vocab/spanish/", deck="Spanish")]

        assert default_deck_for_folder(Path("vocab/spanish"), maps) == "Spanish"

    def test_no_mappings(self) -> None:
        assert default_deck_for_folder(Path("vocab"), []) is None

    def test_ambiguous_deepest_level_returns_none(self) -> None:
        maps = [
            DeckMapping(folder="vocab", deck="Languages"),
            DeckMapping(folder="vocab/spanish", deck="Spanish"),
            DeckMapping(folder="vocab/spanish", deck="Español"),
        ]

        assert default_deck_for_folder(Path("vocab/spanish"), maps) is None

    def test_duplicate_mapping_to_same_deck_is_not_ambiguous(self) -> None:
        maps = [
            DeckMapping(folder="vocab", deck="Languages"),
            DeckMapping(folder="vocab/", deck="Languages"),
        ]

        assert default_deck_for_folder(Path("vocab/spanish"), maps) == "Languages"
