"""Media attachments referenced by note fields."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Media(BaseModel):
    """A file to store alongside a note in Anki's media collection.

    Exactly one source must be given: a local ``path``, a ``url`` Anki
    downloads itself, or base64 ``data``.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(min_length=1)
    path: str | None = None
    url: str | None = None
    data: str | None = None
    fields: tuple[str, ...] = Field(
        default=(), description="Anki fields the media is appended to"
    )

    @model_validator(mode="after")
    def check_single_source(self) -> Media:
        sources = [s for s in (self.path, self.url, self.data) if s is not None]
        if len(sources) != 1:
            msg = "Media needs exactly one of path, url or data"
            raise ValueError(msg)
        return self

    def to_payload(self) -> dict[str, Any]:
        """AnkiConnect media entry (``picture``/``audio`` list element)."""
        payload: dict[str, Any] = {"filename": self.filename}
        if self.path is not None:
            payload["path"] = self.path
        elif self.url is not None:
            payload["url"] = self.url
        else:
            payload["data"] = self.data
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload
