"""Schemas for the raw records produced by the document parser."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from ..error_codes import ErrorCode
from ..exceptions import ParseResultError


class ParseLocationMarker(BaseModel):
    """A position inside a document."""

    model_config = ConfigDict(frozen=True)

    offset: StrictInt
    line: StrictInt
    column: StrictInt


class ParseLocation(BaseModel):
    """Span of a parsed block, optionally with the text it covers."""

    model_config = ConfigDict(frozen=True)

    start: ParseLocationMarker
    end: ParseLocationMarker
    source: StrictStr | None = None


class ParseLineResult(BaseModel):
    """A non-note line emitted by the parser."""

    model_config = ConfigDict(frozen=True)

    type: StrictStr
    text: StrictStr


class ParseNoteResult(BaseModel):
    """A note block: its kind, raw config text, front/back text and location.

    All keys must be present; ``config``, ``front`` and ``back`` may be null.
    """

    model_config = ConfigDict(frozen=True)

    type: StrictStr
    config: StrictStr | None
    front: StrictStr | None
    back: StrictStr | None
    location: ParseLocation

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> ParseNoteResult:
        """Validate a raw parser record.

        Raises:
            ParseResultError: If a key is missing or has the wrong type
        """
        try:
            return cls.model_validate(raw)
        except PydanticValidationError as e:
            err = e.errors()[0]
            field_path = ".".join(str(part) for part in err["loc"])
            raise ParseResultError(
                f"Malformed parse result at '{field_path}': {err['msg']}",
                error_code=ErrorCode.NTE_RESULT_INVALID.value,
                context={"field_path": field_path},
            ) from e
