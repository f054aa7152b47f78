"""Configuration loader for the TfL Status Display app."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Mapping

from dotenv import load_dotenv
import yaml

DEFAULT_MODES = "tube,elizabeth-line"


@dataclass(frozen=True)
class TfLConfig:
    """TfL API configuration."""

    app_key: str
    modes: str
    show_names: bool
    fallback_interval_seconds: int


@dataclass(frozen=True)
class DisplayConfig:
    """Display configuration for rendering."""

    width: int
    height: int
    output_path: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str
    dev_mode: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    tfl: TfLConfig
    display: DisplayConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _first_value(params: Mapping[str, Any], key: str) -> str | None:
    # parse_qs yields lists; plain mappings yield strings.
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value


def modes_from_params(params: Mapping[str, Any], default: str = DEFAULT_MODES) -> str:
    """Return the requested transport modes, or the default when absent or empty."""
    mode = (_first_value(params, "mode") or "").strip()
    return mode or default


def show_names_from_params(params: Mapping[str, Any]) -> bool:
    """Return True only when the names parameter is exactly 'true'."""
    return _first_value(params, "names") == "true"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes"}


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    app_key = os.environ.get("TFL_APP_KEY", "")
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    tfl_section = _require_key(data, "tfl", "tfl")
    display_section = _require_key(data, "display", "display")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(tfl_section, dict):
        raise ValueError("'tfl' config must be a mapping")
    if not isinstance(display_section, dict):
        raise ValueError("'display' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    modes = tfl_section.get("modes") or DEFAULT_MODES
    tfl = TfLConfig(
        app_key=app_key,
        modes=str(modes).strip(),
        show_names=bool(tfl_section.get("show_names", False)),
        fallback_interval_seconds=_require_key(tfl_section, "fallback_interval_seconds", "tfl"),
    )

    display = DisplayConfig(
        width=_require_key(display_section, "width", "display"),
        height=_require_key(display_section, "height", "display"),
        output_path=_require_key(display_section, "output_path", "display"),
    )

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
        dev_mode=bool(logging_section.get("dev_mode", False)) or _env_flag("TFL_STATUS_DEV"),
    )

    return AppConfig(tfl=tfl, display=display, log=logging)


__all__ = [
    "DEFAULT_MODES",
    "AppConfig",
    "DisplayConfig",
    "LoggingConfig",
    "TfLConfig",
    "load_config",
    "modes_from_params",
    "show_names_from_params",
]
