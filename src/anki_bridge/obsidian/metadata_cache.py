"""Document tag metadata read from Obsidian markdown files."""

from __future__ import annotations

import re
import threading
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from ..domain.interfaces.document_metadata import IDocumentMetadata
from ..utils.logging import get_logger
from ..utils.ordered_set import OrderedSet

logger = get_logger(__name__)

FRONTMATTER_TAG_KEYS = ("tags", "tag")

_FENCED_CODE_RE = re.compile(r"^(```|~~~).*?^\1[ \t]*$", re.MULTILINE | re.DOTALL)
_INLINE_CODE_RE = re.compile(r"`[^`\n]*`")
# Obsidian tags need at least one non-digit character
_INLINE_TAG_RE = re.compile(r"(?<![\w#&/])#((?:[\w\-/]*[^\W\d][\w\-/]*))")


def _split_tag_string(value: str) -> list[str]:
    return [part for part in re.split(r"[,\s]+", value) if part]


def frontmatter_tags(metadata: dict[str, Any]) -> list[str]:
    """Tags from front matter, accepting lists and comma/space separated strings."""
    tags: list[str] = []
    for key in FRONTMATTER_TAG_KEYS:
        value = metadata.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            tags.extend(_split_tag_string(value))
        elif isinstance(value, list):
            for item in value:
                if item is None:
                    continue
                tags.extend(_split_tag_string(str(item)))
        else:
            tags.append(str(value))
    return [tag if tag.startswith("#") else f"#{tag}" for tag in tags]


def inline_tags(body: str) -> list[str]:
    """``#tags`` in the body, ignoring code blocks and inline code."""
    text = _FENCED_CODE_RE.sub("", body)
    text = _INLINE_CODE_RE.sub("", text)
    return [f"#{match}" for match in _INLINE_TAG_RE.findall(text)]


class FrontmatterMetadataCache(IDocumentMetadata):
    """Lazily reads and caches the tags of each document.

    Entries are computed on first request; call ``invalidate`` when a
    document changes on disk.
    """

    def __init__(self) -> None:
        self._tags: dict[Path, list[str] | None] = {}
        self._lock = threading.Lock()

    def get_tags(self, file_path: Path) -> list[str] | None:
        with self._lock:
            if file_path in self._tags:
                return self._tags[file_path]

        tags = self._read_tags(file_path)
        with self._lock:
            self._tags[file_path] = tags
        return tags

    def invalidate(self, file_path: Path | None = None) -> None:
        """Forget one document, or every document when ``file_path`` is None."""
        with self._lock:
            if file_path is None:
                self._tags.clear()
            else:
                self._tags.pop(file_path, None)

    def _read_tags(self, file_path: Path) -> list[str] | None:
        try:
            post = frontmatter.load(str(file_path))
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("document_unreadable", file=str(file_path), error=str(e))
            return None
        except yaml.YAMLError as e:
            logger.warning(
                "frontmatter_parse_failed", file=str(file_path), error=str(e)
            )
            return None

        tags = OrderedSet(frontmatter_tags(post.metadata))
        tags.update(inline_tags(post.content))
        logger.debug("document_tags_read", file=str(file_path), count=len(tags))
        return tags.to_list()
