"""Turn raw parser records into Note entities, one document at a time."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..blueprints.cloze import has_cloze_syntax
from ..config_settings import BridgeSettings
from ..domain.entities.fields import NoteField, NoteKind
from ..domain.entities.note import Note, SourceDescriptor
from ..exceptions import ValidationError
from ..models.media import Media
from ..models.note_config import ParseConfig
from ..models.parse_result import ParseLocation, ParseNoteResult
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NoteFailure:
    """A note block that could not be turned into a Note."""

    file: Path
    location: ParseLocation | None
    reason: str
    error: ValidationError

    @property
    def line(self) -> int | None:
        return self.location.start.line if self.location else None


@dataclass
class NoteBuildReport:
    """Notes built from one document plus the blocks that were skipped."""

    file: Path
    notes: list[Note] = field(default_factory=list)
    failures: list[NoteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _is_cloze(result: ParseNoteResult, config: ParseConfig, settings: BridgeSettings) -> bool:
    if config.cloze is not None:
        return config.cloze
    if result.type == NoteKind.CLOZE.value:
        return True
    markers = (
        config.cloze_replacements
        if config.cloze_replacements is not None
        else settings.cloze_replacements
    )
    return has_cloze_syntax(result.front or "", markers)


def build_note(
    result: ParseNoteResult,
    file: Path,
    settings: BridgeSettings,
    source_text: str | None = None,
    medias: Sequence[Media] = (),
) -> Note:
    """Validate a parse result's configuration and assemble its Note.

    Args:
        result: Parser record for the block
        file: Document the block lives in
        settings: Settings snapshot
        source_text: Exact text of the block; defaults to ``location.source``
        medias: Attachments referenced by the block

    Raises:
        ConfigParseError: If the inline configuration is not valid YAML
        ConfigValidationError: If the inline configuration violates the schema
    """
    config = ParseConfig.from_result(result)
    return Note(
        id=config.id,
        fields={
            NoteField.FRONTLIKE: result.front,
            NoteField.BACKLIKE: result.back,
        },
        source=SourceDescriptor(file=file, location=result.location),
        source_text=source_text if source_text is not None else result.location.source or "",
        config=config.to_note_config(),
        medias=tuple(medias),
        is_cloze=_is_cloze(result, config, settings),
    )


def build_notes(
    results: Iterable[ParseNoteResult | Mapping[str, Any]],
    file: Path,
    settings: BridgeSettings,
) -> NoteBuildReport:
    """Build every note block of a document.

    A block that fails validation is reported and skipped; the remaining
    blocks are still built.
    """
    report = NoteBuildReport(file=file)
    for raw in results:
        location: ParseLocation | None = None
        try:
            result = (
                raw
                if isinstance(raw, ParseNoteResult)
                else ParseNoteResult.from_raw(dict(raw))
            )
            location = result.location
            report.notes.append(build_note(result, file, settings))
        except ValidationError as e:
            failure = NoteFailure(
                file=file, location=location, reason=e.message, error=e
            )
            report.failures.append(failure)
            logger.warning(
                "note_skipped",
                file=str(file),
                line=failure.line,
                reason=e.message,
                error_code=e.error_code,
                error_type=type(e).__name__,
            )

    logger.info(
        "notes_built",
        file=str(file),
        built=len(report.notes),
        failed=len(report.failures),
    )
    return report
