"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from disttag.core.errors import ErrorCode
from disttag.output.console import Style
from disttag.release.errors import TagReleaseError

if TYPE_CHECKING:
    from disttag.output.console import ConsoleProtocol


def exit_code_for(error: TagReleaseError) -> ErrorCode:
    match error.kind:
        case "missing_tag":
            return ErrorCode.USER_ERROR
        case "registry_cli_missing":
            return ErrorCode.ENV_ERROR
        case "summary_missing" | "summary_unreadable" | "summary_invalid":
            return ErrorCode.IO_ERROR


def fail(console: ConsoleProtocol, error: TagReleaseError) -> NoReturn:
    """Print ``error`` (and its hint) and exit with the mapped code.

    Replaces the pattern:
        console.error(e.message)
        if e.hint:
            console.print(f"hint: {e.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))
    """
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)
    raise typer.Exit(code=int(exit_code_for(error)))
