"""Global settings snapshot consumed by the resolution components."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldNames(BaseModel):
    """Concrete Anki field names for the two generic note slots."""

    model_config = ConfigDict(frozen=True)

    front_like: str = Field(min_length=1, description="Field holding front-like content")
    back_like: str = Field(min_length=1, description="Field holding back-like content")


class NoteTypeNames(BaseModel):
    """Names pack: the Anki note type to use and its slot field names."""

    model_config = ConfigDict(frozen=True)

    note_type_name: str = Field(min_length=1, description="Anki note type (model) name")
    field_names: FieldNames


class DeckMapping(BaseModel):
    """Default deck for every document below a vault folder."""

    model_config = ConfigDict(frozen=True)

    folder: str = Field(description="Vault-relative folder path; empty for the vault root")
    deck: str = Field(min_length=1, description="Anki deck name")

    @field_validator("folder", mode="before")
    @classmethod
    def normalize_folder(cls, v: Any) -> str:
        """Strip surrounding slashes so 'a/b/' and '/a/b' compare equal."""
        if v is None:
            return ""
        if isinstance(v, Path):
            v = v.as_posix()
        if isinstance(v, str):
            return v.strip().strip("/")
        msg = f"folder must be a string, got {type(v).__name__}"
        raise ValueError(msg)


def _default_basic_names() -> NoteTypeNames:
    return NoteTypeNames(
        note_type_name="Basic",
        field_names=FieldNames(front_like="Front", back_like="Back"),
    )


def _default_cloze_names() -> NoteTypeNames:
    return NoteTypeNames(
        note_type_name="Cloze",
        field_names=FieldNames(front_like="Text", back_like="Back Extra"),
    )


class BridgeSettings(BaseSettings):
    """Bridge configuration using pydantic-settings.

    Instances are frozen: every resolution runs against an immutable snapshot.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANKI_BRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    basic_note_type_names: NoteTypeNames = Field(
        default_factory=_default_basic_names,
        description="Names pack used for basic (front/back) notes",
    )
    cloze_note_type_names: NoteTypeNames = Field(
        default_factory=_default_cloze_names,
        description="Names pack used for cloze notes",
    )
    default_deck_maps: list[DeckMapping] = Field(
        default_factory=list,
        description="Folder to deck mappings, deepest matching folder wins",
    )
    fallback_deck: str = Field(
        default="Default", description="Deck used when nothing else matches"
    )
    inherit_tags: bool = Field(
        default=True, description="Copy document tags onto every note it contains"
    )
    tag_in_anki: str = Field(
        default="obsidian",
        description="Tag added to every note so its origin stays recognisable",
    )
    cloze_replacements: list[str] = Field(
        default_factory=list,
        description="Markers whose enclosed spans become cloze deletions",
    )
    vault_path: Path | None = Field(
        default=None,
        description="Vault root; absolute document paths are made relative to it",
    )
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    @field_validator("vault_path", "log_file", mode="before")
    @classmethod
    def parse_optional_path(cls, v: Any) -> Path | None:
        """Convert strings to expanded Paths; empty means unset."""
        if v is None or v == "":
            return None
        if isinstance(v, (str, Path)):
            return Path(v).expanduser()
        msg = f"Path field must be string or Path, got {type(v).__name__}"
        raise ValueError(msg)

    @field_validator("cloze_replacements")
    @classmethod
    def reject_empty_markers(cls, v: list[str]) -> list[str]:
        """An empty marker would match between every pair of characters."""
        if any(not marker for marker in v):
            msg = "cloze_replacements cannot contain empty markers"
            raise ValueError(msg)
        return v

    def names_pack(self, is_cloze: bool) -> NoteTypeNames:
        """Select the names pack for a note kind."""
        return self.cloze_note_type_names if is_cloze else self.basic_note_type_names
