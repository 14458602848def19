"""Fan-out of ``npm dist-tag add`` over a publish summary.

All commands are started back-to-back and left running. Exit codes and
output are never collected.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from disttag.core.result import Err, Ok, Result
from disttag.output.console import ConsoleProtocol, Style
from disttag.platform.process import Spawner, spawn, which
from disttag.release.errors import TagReleaseError
from disttag.release.model import DistTagInvocation, DistTagRun, PublishSummaryEntry

__all__ = [
    "dist_tag_command",
    "ensure_registry_cli",
    "issue_dist_tags",
    "require_tag",
]


def require_tag(tag: str | None) -> Result[str, TagReleaseError]:
    value = (tag or "").strip()
    if not value:
        return Err(
            TagReleaseError(
                kind="missing_tag",
                message="Required option `tag` not specified",
                hint="Pass --tag <tag>, e.g. --tag latest",
            )
        )
    return Ok(value)


def ensure_registry_cli(registry_cli: str) -> Result[str, TagReleaseError]:
    """Resolve the registry CLI executable before anything is spawned."""
    exe = which(registry_cli)
    if exe is None:
        return Err(
            TagReleaseError(
                kind="registry_cli_missing",
                message=f"{registry_cli}: missing",
                hint="Install Node.js/npm or pass --registry-cli.",
            )
        )
    return Ok(exe)


def dist_tag_command(entry: PublishSummaryEntry, tag: str, *, registry_cli: str) -> list[str]:
    return [registry_cli, "dist-tag", "add", entry.spec, tag]


def issue_dist_tags(
    entries: Iterable[PublishSummaryEntry],
    tag: str,
    *,
    registry_cli: str,
    cwd: Path,
    console: ConsoleProtocol,
    spawner: Spawner = spawn,
) -> DistTagRun:
    """Start one dist-tag command per entry without waiting for any.

    A spawn failure is reported as a warning and the remaining entries
    are still issued.
    """
    issued: list[DistTagInvocation] = []
    failed: list[PublishSummaryEntry] = []

    for entry in entries:
        cmd = dist_tag_command(entry, tag, registry_cli=registry_cli)
        console.print(" ".join(cmd), Style.DIM)

        result = spawner(cmd, cwd)
        if isinstance(result, Err):
            console.warning(str(result.error))
            failed.append(entry)
            continue

        issued.append(DistTagInvocation(entry=entry, command=tuple(cmd), process=result.value))

    return DistTagRun(tag=tag, issued=tuple(issued), spawn_failed=tuple(failed))
