"""Tag resolution domain service."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ...utils.logging import get_logger
from ...utils.ordered_set import OrderedSet

if TYPE_CHECKING:
    from ...config_settings import BridgeSettings
    from ..entities.note import Note
    from ..interfaces.document_metadata import IDocumentMetadata

logger = get_logger(__name__)

ANKI_HIERARCHY_SEPARATOR = "::"


def to_anki_tag(tag: str) -> str:
    """Convert a document tag to Anki form: ``#lang/es`` -> ``lang::es``."""
    if tag.startswith("#"):
        tag = tag[1:]
    return tag.replace("/", ANKI_HIERARCHY_SEPARATOR)


def _document_tags(
    note: Note, metadata: IDocumentMetadata | None
) -> list[str] | None:
    if metadata is None:
        return None
    return metadata.get_tags(note.source.file)


def resolve_tags(
    note: Note,
    settings: BridgeSettings,
    metadata: IDocumentMetadata | None = None,
) -> OrderedSet[str]:
    """Return the deduplicated tags to store on the Anki note.

    With tag inheritance on, the document's tags come first (converted to
    Anki's hierarchy syntax), then the note's own tags, then the origin tag.
    Otherwise only the origin tag and the note's own tags are used. The
    origin tag ``settings.tag_in_anki`` is always present.

    Args:
        note: Note to tag
        settings: Settings snapshot
        metadata: Document metadata source; None disables inheritance

    Returns:
        Tags in first-seen order
    """
    own_tags: Iterable[str] = note.config.tags or ()

    raw_document_tags = _document_tags(note, metadata) if settings.inherit_tags else None
    if not raw_document_tags:
        return OrderedSet([settings.tag_in_anki, *own_tags])

    tags: OrderedSet[str] = OrderedSet()
    tags.update(
        converted for converted in map(to_anki_tag, raw_document_tags) if converted
    )
    tags.update(own_tags)
    tags.add(settings.tag_in_anki)

    logger.debug(
        "tags_resolved",
        file=str(note.source.file),
        inherited=len(raw_document_tags),
        total=len(tags),
    )
    return tags
