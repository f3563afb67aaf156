"""Text form shared by every note kind.

A note is written back into its document as a fenced block::

    ```anki-basic
    id: 1699999999999
    deck: Spanish
    ---
    hablar
    ---
    to speak
    ```

The configuration and its separator are omitted when there is nothing to
configure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from ..domain.entities.fields import NoteKind
    from ..domain.entities.note import Note

FENCE = "```"
SECTION_SEPARATOR = "---"
BLOCK_LANGUAGE_PREFIX = "anki-"


class _ConfigDumper(yaml.SafeDumper):
    """Block-style mappings with flow-style lists."""

    def represent_list(self, data: list[Any]) -> yaml.Node:
        return self.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)


_ConfigDumper.add_representer(list, _ConfigDumper.represent_list)


def dump_config(config: dict[str, Any]) -> str:
    """YAML for an inline config: insertion order, one line per key."""
    return yaml.dump(
        config,
        Dumper=_ConfigDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,
    ).rstrip("\n")


def render_block(kind: NoteKind, config: dict[str, Any], sections: list[str]) -> str:
    lines = [f"{FENCE}{BLOCK_LANGUAGE_PREFIX}{kind.value}"]
    if config:
        lines.append(dump_config(config))
        lines.append(SECTION_SEPARATOR)
    lines.append(f"\n{SECTION_SEPARATOR}\n".join(sections))
    lines.append(FENCE)
    return "\n".join(lines)


class NoteRenderer(ABC):
    """Renders one note kind back into document text."""

    kind: NoteKind

    @abstractmethod
    def sections(self, note: Note) -> list[str]:
        """Content sections in document order."""

    def render_as_text(self, note: Note) -> str:
        return render_block(self.kind, note.config_for_text(), self.sections(note))
