from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from disttag.core.config import SUMMARY_FILENAME, TaggerConfig, load_config
from disttag.core.errors import ErrorCode
from disttag.core.result import Err
from disttag.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: TaggerConfig
    cwd: Path
    console: ConsoleProtocol


def make_console() -> ConsoleProtocol:
    return RichConsole()


def build_context(
    *,
    console: ConsoleProtocol,
    default_summary: Path | None = None,
    summary: Path | None = None,
    registry_cli: str | None = None,
    config_path: Path | None = None,
) -> CLIContext:
    """Resolve configuration in order: ``default_summary`` (or the summary
    in the current directory), then --config, then flags.
    """
    cwd = Path.cwd()

    if default_summary is None:
        default_summary = cwd / SUMMARY_FILENAME
    config = TaggerConfig(summary_path=default_summary)
    if config_path is not None:
        loaded = load_config(config_path.expanduser(), base=config)
        if isinstance(loaded, Err):
            console.error(loaded.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = loaded.value

    config = config.with_overrides(
        summary_path=summary.expanduser() if summary is not None else None,
        registry_cli=registry_cli,
    )
    return CLIContext(config=config, cwd=cwd, console=console)
