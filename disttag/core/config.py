"""Typed configuration for a tagging run.

The summary location and the registry CLI are explicit values on
``TaggerConfig`` rather than paths computed from the running module, so
tests and callers can point the runner anywhere.

An optional TOML file may supply defaults::

    [dist-tag]
    summary = "lerna-publish-summary.json"
    registry_cli = "npm"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import as_str_dict, get_str, get_table

__all__ = [
    "DEFAULT_REGISTRY_CLI",
    "SUMMARY_FILENAME",
    "ConfigError",
    "TaggerConfig",
    "default_summary_path",
    "load_config",
]

SUMMARY_FILENAME = "lerna-publish-summary.json"
DEFAULT_REGISTRY_CLI = "npm"

_CONFIG_TABLE = "dist-tag"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class TaggerConfig:
    summary_path: Path
    registry_cli: str = DEFAULT_REGISTRY_CLI

    def with_overrides(
        self,
        *,
        summary_path: Path | None = None,
        registry_cli: str | None = None,
    ) -> TaggerConfig:
        """Return a copy with any non-None override applied."""
        config = self
        if summary_path is not None:
            config = replace(config, summary_path=summary_path)
        if registry_cli:
            config = replace(config, registry_cli=registry_cli)
        return config


def default_summary_path(script: Path) -> Path:
    """Publish summary location for a launcher script: one directory above it."""
    return script.resolve().parent.parent / SUMMARY_FILENAME


def load_config(path: Path, *, base: TaggerConfig) -> Result[TaggerConfig, ConfigError]:
    """Load a TOML config file on top of ``base``.

    A relative ``summary`` resolves against the config file's directory.
    A file without a ``[dist-tag]`` table leaves ``base`` unchanged.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(ConfigError(f"config not found: {path}", path))
    except OSError as e:
        return Err(ConfigError(f"cannot read config: {e}", path))

    try:
        data = as_str_dict(tomllib.loads(raw))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"invalid TOML: {e}", path))

    if data is None:
        return Err(ConfigError("config root must be a table", path))

    if _CONFIG_TABLE in data and get_table(data, _CONFIG_TABLE) is None:
        return Err(ConfigError(f"[{_CONFIG_TABLE}] must be a table", path))

    table = get_table(data, _CONFIG_TABLE)
    if table is None:
        return Ok(base)

    summary: Path | None = None
    summary_raw = get_str(table, "summary")
    if summary_raw is not None:
        summary = Path(summary_raw).expanduser()
        if not summary.is_absolute():
            summary = path.resolve().parent / summary

    return Ok(
        base.with_overrides(
            summary_path=summary,
            registry_cli=get_str(table, "registry_cli"),
        )
    )
