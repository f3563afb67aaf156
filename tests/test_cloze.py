"""Tests for cloze deletion syntax helpers."""

import pytest

from anki_bridge.blueprints.cloze import (
    apply_cloze_replacements,
    effective_markers,
    has_cloze_syntax,
)
from anki_bridge.config_settings import BridgeSettings
from anki_bridge.models import NoteConfig


class TestHasClozeSyntax:
    def test_anki_deletion(self) -> None:
        assert has_cloze_syntax("{{c1::Madrid}} is the capital")

    def test_marker_span(self) -> None:
        assert has_cloze_syntax("==Madrid== is the capital", ["=="])

    def test_plain_text(self) -> None:
        assert not has_cloze_syntax("Madrid is the capital", ["=="])

    def test_unpaired_marker(self) -> None:
        assert not has_cloze_syntax("a == b", ["=="])

    def test_no_markers(self) -> None:
        assert not has_cloze_syntax("==Madrid==")


class TestApplyClozeReplacements:
    def test_numbering_follows_position(self) -> None:
        text = "**Madrid** is the capital of ==Spain== and **Europe**"

        assert apply_cloze_replacements(text, ["==", "**"]) == (
            "{{c1::Madrid}} is the capital of {{c2::Spain}} and {{c3::Europe}}"
        )

    def test_numbering_continues_after_existing(self) -> None:
        text = "{{c2::Madrid}} is the capital of ==Spain=="

        assert apply_cloze_replacements(text, ["=="]) == (
            "{{c2::Madrid}} is the capital of {{c3::Spain}}"
        )

    def test_longer_marker_wins(self) -> None:
        assert apply_cloze_replacements("==x== and =y=", ["=", "=="]) == (
            "{{c1::x}} and {{c2::y}}"
        )

    def test_spans_do_not_cross_lines(self) -> None:
        text = "==open\nclose=="

        assert apply_cloze_replacements(text, ["=="]) == text

    def test_no_markers_is_identity(self) -> None:
        assert apply_cloze_replacements("==x==", []) == "==x=="


class TestEffectiveMarkers:
    def test_note_markers_override_settings(self, make_note) -> None:
        settings = BridgeSettings(_env_file=None, cloze_replacements=["=="])
        note = make_note(config=NoteConfig(cloze_replacements=("**",)))

        assert effective_markers(note, settings) == ("**",)

    def test_settings_markers_by_default(self, make_note) -> None:
        settings = BridgeSettings(_env_file=None, cloze_replacements=["=="])

        assert effective_markers(make_note(), settings) == ("==",)

    def test_empty_marker_rejected_in_settings(self) -> None:
        with pytest.raises(ValueError):
            BridgeSettings(_env_file=None, cloze_replacements=[""])
