"""Environment-driven settings for the editor and telemetry layers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "DRAFTKIT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = _env(name, environ=environ)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def env_int(
    name: str, fallback: int, *, environ: Optional[Mapping[str, str]] = None
) -> int:
    raw = _env(name, environ=environ)
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


def env_str(
    name: str, default: str = "", *, environ: Optional[Mapping[str, str]] = None
) -> str:
    value = _env(name, environ=environ)
    return default if value is None else value


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Knobs consumed by :class:`draftkit.editor.SmartEditor`."""

    indent_width: int = 2
    continue_lists: bool = True

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ValueError("indent_width must be at least 1")

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    logger_name: str = "draftkit"
    log_level: str = "INFO"
    log_file: str = ""
    console: bool = True
    color: bool = True
    json: bool = False
    buffered: bool = False
    buffer_size: int = 2048


def load_editor_settings(
    environ: Optional[Mapping[str, str]] = None,
) -> EditorSettings:
    return EditorSettings(
        indent_width=env_int("INDENT_WIDTH", 2, environ=environ),
        continue_lists=env_flag("CONTINUE_LISTS", True, environ=environ),
    )


def load_telemetry_settings(
    environ: Optional[Mapping[str, str]] = None,
) -> TelemetrySettings:
    """Read ``DRAFTKIT_LOG_*`` variables into a :class:`TelemetrySettings`."""

    return TelemetrySettings(
        logger_name=env_str("LOGGER", "draftkit", environ=environ),
        log_level=env_str("LOG_LEVEL", "INFO", environ=environ).upper(),
        log_file=env_str("LOG_FILE", "", environ=environ),
        console=not env_flag("DISABLE_CONSOLE", False, environ=environ),
        color=not env_flag("NO_COLOR", False, environ=environ),
        json=env_flag("LOG_JSON", False, environ=environ),
        buffered=env_flag("LOG_BUFFERED", False, environ=environ),
        buffer_size=env_int("LOG_BUFFER_SIZE", 2048, environ=environ),
    )


__all__ = [
    "ENV_PREFIX",
    "EditorSettings",
    "TelemetrySettings",
    "env_flag",
    "env_int",
    "env_str",
    "load_editor_settings",
    "load_telemetry_settings",
]
