"""Pure domain services over notes and a settings snapshot."""

from .deck_resolver import default_deck_for_folder, resolve_deck
from .sync_planner import plan_sync_action
from .tag_resolver import resolve_tags, to_anki_tag

__all__ = [
    "default_deck_for_folder",
    "plan_sync_action",
    "resolve_deck",
    "resolve_tags",
    "to_anki_tag",
]
