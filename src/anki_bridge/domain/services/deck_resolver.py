"""Deck resolution domain service.

The effective deck of a note is the first of:

1. the ``deck`` key of its inline configuration,
2. the deck mapped to the deepest vault folder containing its document,
3. the fallback deck from the settings.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ...utils.logging import get_logger
from ...utils.ordered_set import OrderedSet

if TYPE_CHECKING:
    from ...config_settings import BridgeSettings, DeckMapping
    from ..entities.note import Note

logger = get_logger(__name__)


def _path_parts(path: str) -> tuple[str, ...]:
    return tuple(part for part in path.split("/") if part not in ("", "."))


def _folder_parts(folder: Path, vault_path: Path | None) -> tuple[str, ...]:
    if vault_path is not None and folder.is_absolute():
        try:
            folder = folder.relative_to(vault_path)
        except ValueError:
            logger.debug(
                "document_outside_vault", folder=str(folder), vault_path=str(vault_path)
            )
    return _path_parts(folder.as_posix())


def default_deck_for_folder(
    folder: Path,
    deck_maps: Sequence[DeckMapping],
    vault_path: Path | None = None,
) -> str | None:
    """Find the deck mapped to the deepest ancestor of ``folder``.

    A mapping applies to its folder and everything below it. When several
    mappings share the deepest matching folder but name different decks, the
    result is ambiguous and None is returned.

    Args:
        folder: Folder of the document
        deck_maps: Configured folder to deck mappings
        vault_path: Vault root used to relativize an absolute ``folder``

    Returns:
        Deck name, or None when no mapping applies unambiguously
    """
    parts = _folder_parts(folder, vault_path)

    best_depth = -1
    candidates: list[DeckMapping] = []
    for mapping in deck_maps:
        mapping_parts = _path_parts(mapping.folder)
        if parts[: len(mapping_parts)] != mapping_parts:
            continue
        depth = len(mapping_parts)
        if depth > best_depth:
            best_depth = depth
            candidates = [mapping]
        elif depth == best_depth:
            candidates.append(mapping)

    decks = OrderedSet(mapping.deck for mapping in candidates)
    if not decks:
        return None
    if len(decks) > 1:
        logger.warning(
            "ambiguous_deck_mapping",
            folder="/".join(parts),
            decks=decks.to_list(),
        )
        return None
    return next(iter(decks))


def resolve_deck(note: Note, settings: BridgeSettings) -> str:
    """Return the effective deck name for a note."""
    if note.config.deck:
        logger.debug("deck_resolved", source="config", deck=note.config.deck)
        return note.config.deck

    mapped = default_deck_for_folder(
        note.source.folder, settings.default_deck_maps, settings.vault_path
    )
    if mapped:
        logger.debug(
            "deck_resolved",
            source="folder_mapping",
            deck=mapped,
            file=str(note.source.file),
        )
        return mapped

    logger.debug("deck_resolved", source="fallback", deck=settings.fallback_deck)
    return settings.fallback_deck
