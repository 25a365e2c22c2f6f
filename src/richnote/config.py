"""Configuration loader for richnote.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore


class ConfigError(ValueError):
    """Raised when a config value has the wrong type or an unknown choice."""


@dataclass
class IdConfig:
    """Note ID generation configuration."""
    strategy: str = "uuid"
    bytes: int = 6


@dataclass
class EditorConfig:
    """Editor defaults exposed to presentation layers."""
    font_sizes: list[float] = field(default_factory=lambda: [12, 16, 20, 24])
    tab_label: str = "Note {n}"


@dataclass
class ApiConfig:
    """Local HTTP adapter configuration."""
    host: str = "127.0.0.1"
    port: int = 8766


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"


@dataclass
class RichnoteConfig:
    """Complete richnote configuration."""
    id: IdConfig
    editor: EditorConfig
    api: ApiConfig
    log: LogConfig


def load_config(config_path: Path | None = None) -> RichnoteConfig:
    """
    Load configuration from richnote.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/richnote.toml

    Missing files fall back to defaults.
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "richnote.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    id_data = toml_data.get("id", {})
    id_config = IdConfig(
        strategy=id_data.get("strategy", "uuid"),
        bytes=id_data.get("bytes", 6),
    )
    if id_config.strategy not in ("uuid", "hex"):
        raise ConfigError(f"id.strategy must be 'uuid' or 'hex', got {id_config.strategy!r}")
    if not isinstance(id_config.bytes, int) or id_config.bytes < 1:
        raise ConfigError("id.bytes must be a positive integer")

    editor_data = toml_data.get("editor", {})
    editor_config = EditorConfig(
        font_sizes=list(editor_data.get("font_sizes", [12, 16, 20, 24])),
        tab_label=editor_data.get("tab_label", "Note {n}"),
    )
    if any(not isinstance(s, (int, float)) or s <= 0 for s in editor_config.font_sizes):
        raise ConfigError("editor.font_sizes must be positive numbers")

    api_data = toml_data.get("api", {})
    api_config = ApiConfig(
        host=api_data.get("host", "127.0.0.1"),
        port=api_data.get("port", 8766),
    )

    log_data = toml_data.get("log", {})
    log_config = LogConfig(level=str(log_data.get("level", "WARNING")).upper())

    return RichnoteConfig(
        id=id_config,
        editor=editor_config,
        api=api_config,
        log=log_config,
    )
