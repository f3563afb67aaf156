"""Cloze notes and cloze deletion syntax."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..domain.entities.fields import NoteKind
from .base import NoteRenderer

if TYPE_CHECKING:
    from ..config_settings import BridgeSettings
    from ..domain.entities.note import Note

CLOZE_DELETION_RE = re.compile(r"\{\{c(\d+)::")


def _marker_pattern(markers: Sequence[str]) -> re.Pattern[str] | None:
    markers = [m for m in markers if m]
    if not markers:
        return None
    # Longest first so "==" wins over "="
    ordered = sorted(set(markers), key=len, reverse=True)
    alternatives = [
        f"{re.escape(m)}(?P<m{i}>[^\\n]+?){re.escape(m)}" for i, m in enumerate(ordered)
    ]
    return re.compile("|".join(alternatives))


def has_cloze_syntax(text: str, markers: Sequence[str] = ()) -> bool:
    """True when the text holds Anki deletions or a marker-delimited span."""
    if CLOZE_DELETION_RE.search(text):
        return True
    pattern = _marker_pattern(markers)
    return bool(pattern and pattern.search(text))


def apply_cloze_replacements(text: str, markers: Sequence[str]) -> str:
    """Turn ``<marker>span<marker>`` into numbered ``{{cN::span}}`` deletions.

    Numbering continues after the highest deletion already in the text.
    """
    pattern = _marker_pattern(markers)
    if pattern is None:
        return text

    existing = [int(n) for n in CLOZE_DELETION_RE.findall(text)]
    counter = max(existing, default=0)

    def replace(match: re.Match[str]) -> str:
        nonlocal counter
        counter += 1
        span = next(v for v in match.groupdict().values() if v is not None)
        return f"{{{{c{counter}::{span}}}}}"

    return pattern.sub(replace, text)


def effective_markers(note: Note, settings: BridgeSettings) -> tuple[str, ...]:
    """Markers from the note's config, else the global setting."""
    if note.config.cloze_replacements is not None:
        return note.config.cloze_replacements
    return tuple(settings.cloze_replacements)


class ClozeRenderer(NoteRenderer):
    kind = NoteKind.CLOZE

    def sections(self, note: Note) -> list[str]:
        if note.back:
            return [note.front, note.back]
        return [note.front]
