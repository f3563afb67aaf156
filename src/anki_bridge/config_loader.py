"""Settings loader: YAML file plus environment, validated by pydantic-settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .config_settings import BridgeSettings
from .error_codes import ErrorCode
from .exceptions import ConfigurationError
from .utils.logging import get_logger

DEFAULT_SETTINGS_FILE = "anki-bridge.yaml"

logger = get_logger(__name__)


def _candidate_paths(config_path: Path | None) -> list[Path]:
    if config_path:
        return [config_path.expanduser()]
    candidates: list[Path] = []
    env_path = os.getenv("ANKI_BRIDGE_CONFIG")
    if env_path:
        candidates.append(Path(env_path).expanduser())
    candidates.append(Path.cwd() / DEFAULT_SETTINGS_FILE)
    return candidates


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(
            "settings_yaml_load_error",
            config_path=str(path),
            error=str(e),
            error_type=type(e).__name__,
        )
        msg = f"Failed to parse settings file: {path}"
        raise ConfigurationError(
            msg,
            suggestion=(
                "Check YAML syntax (indentation, colons, quotes). "
                f"Original error: {e}"
            ),
            error_code=ErrorCode.CFG_SETTINGS_PARSE.value,
        ) from e

    if not isinstance(data, dict):
        msg = f"Settings file must contain a mapping, got {type(data).__name__}: {path}"
        raise ConfigurationError(msg, error_code=ErrorCode.CFG_SETTINGS_PARSE.value)
    return data


def load_settings(config_path: Path | None = None, **overrides: Any) -> BridgeSettings:
    """Load settings from a YAML file, the environment and keyword overrides.

    Precedence, highest first: ``overrides``, YAML values, environment
    variables (``ANKI_BRIDGE_*``), defaults.

    Args:
        config_path: Explicit settings file; otherwise ``$ANKI_BRIDGE_CONFIG``
            or ``./anki-bridge.yaml`` is used when present

    Raises:
        ConfigurationError: If the file is malformed or holds invalid values
    """
    resolved: Path | None = None
    candidates = _candidate_paths(config_path)
    for candidate in candidates:
        if candidate.exists():
            resolved = candidate
            break

    data: dict[str, Any] = {}
    if resolved:
        data = _read_yaml(resolved)
    elif config_path:
        msg = f"Settings file not found: {config_path}"
        raise ConfigurationError(msg, error_code=ErrorCode.CFG_SETTINGS_PARSE.value)
    else:
        logger.debug(
            "settings_file_not_found", searched_paths=[str(p) for p in candidates]
        )

    data.update(overrides)

    try:
        settings = BridgeSettings(**data)
    except PydanticValidationError as e:
        msg = f"Invalid settings: {e.error_count()} error(s)"
        raise ConfigurationError(
            msg,
            suggestion=str(e),
            error_code=ErrorCode.CFG_SETTINGS_INVALID.value,
            context={"config_path": str(resolved) if resolved else None},
        ) from e

    logger.info(
        "settings_loaded",
        config_path=str(resolved) if resolved else None,
        fallback_deck=settings.fallback_deck,
        deck_maps=len(settings.default_deck_maps),
        inherit_tags=settings.inherit_tags,
    )
    return settings
