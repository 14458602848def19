from __future__ import annotations

from pathlib import Path

import typer

from disttag import __version__
from disttag.cli.commands._helpers import fail
from disttag.cli.context import build_context, make_console
from disttag.core.result import Err
from disttag.output.console import ConsoleProtocol, Style
from disttag.platform.process import spawn
from disttag.release.dist_tag import ensure_registry_cli, issue_dist_tags, require_tag
from disttag.release.model import DistTagRun
from disttag.release.summary import load_publish_summary


def tag_release(
    typer_ctx: typer.Context,
    tag: str | None = typer.Option(
        None,
        "--tag",
        help="The npm tag to add to every package published in the latest release.",
        show_default=False,
    ),
    summary: Path | None = typer.Option(
        None,
        "--summary",
        help="Publish summary written by `lerna publish --summary-file`.",
    ),
    registry_cli: str | None = typer.Option(
        None,
        "--registry-cli",
        help="Registry CLI used for `dist-tag add` (default: npm).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="TOML config file supplying summary and registry CLI defaults.",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Add a dist-tag to every package/version in the publish summary."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    console = make_console()

    tag_result = require_tag(tag)
    if isinstance(tag_result, Err):
        fail(console, tag_result.error)

    # main(script=...) passes the launcher's summary path as the click context obj
    launcher_summary = typer_ctx.obj if isinstance(typer_ctx.obj, Path) else None
    ctx = build_context(
        console=console,
        default_summary=launcher_summary,
        summary=summary,
        registry_cli=registry_cli,
        config_path=config,
    )

    entries = load_publish_summary(ctx.config.summary_path)
    if isinstance(entries, Err):
        fail(ctx.console, entries.error)

    if not entries.value:
        ctx.console.print(f"{ctx.config.summary_path}: no packages published", Style.DIM)
        return

    exe = ensure_registry_cli(ctx.config.registry_cli)
    if isinstance(exe, Err):
        fail(ctx.console, exe.error)

    run = issue_dist_tags(
        entries.value,
        tag_result.value,
        registry_cli=exe.value,
        cwd=ctx.cwd,
        console=ctx.console,
        spawner=spawn,
    )
    _print_run(run, ctx.console)


def _print_run(run: DistTagRun, console: ConsoleProtocol) -> None:
    if run.spawn_failed:
        failed = ", ".join(e.spec for e in run.spawn_failed)
        console.warning(f"not started: {failed}")
    console.success(f"issued {len(run.issued)} dist-tag command(s) for '{run.tag}'")
