"""Tests for the Note entity, rendering and the dirty check."""

import pytest
import yaml

from anki_bridge.config_settings import BridgeSettings, FieldNames, NoteTypeNames
from anki_bridge.domain.entities import NoteField, NoteKind, has_id
from anki_bridge.models import NoteConfig, validate_note_config, validate_parse_config

BASIC_TEXT = "```anki-basic\nid: 42\ndeck: Spanish\ntags: [verbs]\n---\nhablar\n---\nto speak\n```"


class TestEnabled:
    """Only an explicit ``enabled: false`` disables a note."""

    def test_absent_means_enabled(self, make_note) -> None:
        assert make_note(config=validate_note_config("")).get_enabled() is True

    def test_false_disables(self, make_note) -> None:
        assert make_note(config=NoteConfig(enabled=False)).get_enabled() is False

    def test_true_re_enables(self, make_note) -> None:
        assert make_note(config=NoteConfig(enabled=True)).get_enabled() is True


class TestRendering:
    """Text form of notes."""

    def test_basic_with_config(self, make_note) -> None:
        note = make_note(
            note_id=42, config=NoteConfig(deck="Spanish", tags=("verbs",))
        )

        assert note.render_as_text() == BASIC_TEXT

    def test_basic_without_config(self, make_note) -> None:
        assert make_note().render_as_text() == (
            "```anki-basic\nhablar\n---\nto speak\n```"
        )

    def test_scalar_only_config_is_block_style(self, make_note) -> None:
        note = make_note(note_id=42, config=NoteConfig(deck="Spanish", enabled=True))

        assert note.render_as_text() == (
            "```anki-basic\nid: 42\ndeck: Spanish\nenabled: true\n---\nhablar\n---\nto speak\n```"
        )

    def test_id_only_config(self, make_note) -> None:
        assert make_note().with_id(42).render_as_text() == (
            "```anki-basic\nid: 42\n---\nhablar\n---\nto speak\n```"
        )

    def test_note_id_wins_over_parsed_config_id(self, make_note) -> None:
        note = make_note(config=validate_parse_config("id: 5\ndeck: X")).with_id(7)

        assert note.render_as_text() == (
            "```anki-basic\nid: 7\ndeck: X\n---\nhablar\n---\nto speak\n```"
        )

    def test_missing_back_renders_empty_section(self, make_note) -> None:
        assert make_note(back=None).render_as_text() == (
            "```anki-basic\nhablar\n---\n\n```"
        )

    def test_cloze_without_back(self, make_note) -> None:
        note = make_note(front="{{c1::Madrid}} is the capital", back=None, is_cloze=True)

        assert note.render_as_text() == (
            "```anki-cloze\n{{c1::Madrid}} is the capital\n```"
        )

    def test_cloze_with_back_and_replacements(self, make_note) -> None:
        note = make_note(
            front="==Madrid== is the capital",
            back="of Spain",
            is_cloze=True,
            config=NoteConfig(cloze_replacements=("==",)),
        )

        lines = note.render_as_text().split("\n")

        assert lines[0] == "```anki-cloze"
        assert yaml.safe_load(lines[1]) == {"clozeReplacements": ["=="]}
        assert lines[2:] == ["---", "==Madrid== is the capital", "---", "of Spain", "```"]


class TestShouldUpdateFile:
    """Render-and-compare staleness check."""

    def test_unchanged_text_is_clean(self, make_note) -> None:
        note = make_note(
            note_id=42,
            config=NoteConfig(deck="Spanish", tags=("verbs",)),
            source_text=BASIC_TEXT,
        )

        assert note.should_update_file() is False

    def test_new_id_makes_text_stale(self, make_note) -> None:
        note = make_note(
            config=NoteConfig(deck="Spanish", tags=("verbs",)),
            source_text="```anki-basic\ndeck: Spanish\ntags: [verbs]\n---\nhablar\n---\nto speak\n```",
        )

        assert note.should_update_file() is False
        assert note.with_id(42).should_update_file() is True

    def test_scalar_only_config_round_trips_clean(self, make_note) -> None:
        note = make_note(
            note_id=42,
            config=NoteConfig(deck="Spanish"),
            source_text="```anki-basic\nid: 42\ndeck: Spanish\n---\nhablar\n---\nto speak\n```",
        )

        assert note.should_update_file() is False

    def test_disabled_note_is_never_stale(self, make_note) -> None:
        note = make_note(config=NoteConfig(enabled=False), source_text="anything")

        assert note.render_as_text() != note.source_text
        assert note.should_update_file() is False

    def test_whitespace_drift_counts(self, make_note) -> None:
        note = make_note(source_text="```anki-basic\nhablar \n---\nto speak\n```")

        assert note.should_update_file() is True


class TestNoteIdentity:
    """Ids, kinds and model names."""

    def test_has_id(self, make_note) -> None:
        assert has_id(make_note(note_id=None)) is False
        assert has_id(make_note(note_id=5)) is True

    def test_with_id_returns_new_note(self, make_note) -> None:
        note = make_note()
        synced = note.with_id(99)

        assert note.id is None
        assert synced.id == 99
        assert synced.fields == note.fields

    def test_note_is_immutable(self, make_note) -> None:
        note = make_note()

        with pytest.raises(Exception):
            note.id = 3
        with pytest.raises(TypeError):
            note.fields[NoteField.FRONTLIKE] = "changed"

    def test_none_fields_are_dropped(self, make_note) -> None:
        note = make_note(back=None)

        assert NoteField.BACKLIKE not in note.fields
        assert note.back == ""

    def test_kind(self, make_note) -> None:
        assert make_note().kind is NoteKind.BASIC
        assert make_note(is_cloze=True).kind is NoteKind.CLOZE

    def test_model_name(self, settings, make_note) -> None:
        assert make_note().get_model_name(settings) == "Basic"
        assert make_note(is_cloze=True).get_model_name(settings) == "Cloze"

    def test_model_name_from_custom_pack(self, make_note) -> None:
        settings = BridgeSettings(
            _env_file=None,
            cloze_note_type_names=NoteTypeNames(
                note_type_name="Cloze+",
                field_names=FieldNames(front_like="Text", back_like="Extra"),
            ),
        )

        assert make_note(is_cloze=True).get_model_name(settings) == "Cloze+"
