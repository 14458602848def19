from __future__ import annotations

from pathlib import Path

import typer

from disttag.cli.commands.tag_release import tag_release
from disttag.core.config import default_summary_path


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)

app.command()(tag_release)


def main(argv: list[str] | None = None, *, script: Path | None = None) -> None:
    """Entry point.

    With ``script``, the publish summary defaults to
    ``lerna-publish-summary.json`` one directory above that script;
    otherwise it is looked up in the current directory. Either default
    yields to ``--config`` and then to ``--summary``.
    """
    obj = default_summary_path(script) if script is not None else None
    app(args=argv, prog_name="dist-tag-release", obj=obj)
