"""Loading the publish summary written by ``lerna publish --summary-file``.

The file is a JSON array of ``{"packageName": ..., "version": ...}``
objects. Any problem with it fails the run before a single command is
issued.
"""

from __future__ import annotations

import json
from pathlib import Path

from disttag.core.result import Err, Ok, Result
from disttag.core.structured import as_obj_list, as_str_dict, get_raw_str
from disttag.release.errors import TagReleaseError
from disttag.release.model import PublishSummaryEntry

__all__ = ["load_publish_summary", "parse_publish_summary"]


def load_publish_summary(path: Path) -> Result[tuple[PublishSummaryEntry, ...], TagReleaseError]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(
            TagReleaseError(
                kind="summary_missing",
                message=f"publish summary not found: {path}",
                hint="Run `lerna publish --summary-file` first, or pass --summary.",
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            TagReleaseError(
                kind="summary_unreadable",
                message=f"cannot read publish summary: {path}",
                hint=str(e),
            )
        )

    return parse_publish_summary(text, source=path)


def parse_publish_summary(
    text: str,
    *,
    source: Path | str,
) -> Result[tuple[PublishSummaryEntry, ...], TagReleaseError]:
    """Parse publish summary JSON into entries, preserving array order."""
    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            TagReleaseError(
                kind="summary_invalid",
                message=f"publish summary is not valid JSON: {source}",
                hint=str(e),
            )
        )

    items = as_obj_list(obj)
    if items is None:
        return Err(
            TagReleaseError(
                kind="summary_invalid",
                message=f"publish summary must be a JSON array: {source}",
            )
        )

    entries: list[PublishSummaryEntry] = []
    for index, item in enumerate(items):
        data = as_str_dict(item)
        name = get_raw_str(data, "packageName") if data is not None else None
        version = get_raw_str(data, "version") if data is not None else None
        if name is None or version is None:
            return Err(
                TagReleaseError(
                    kind="summary_invalid",
                    message=f"publish summary entry {index} needs string packageName and version",
                    hint=f"{source}: {item!r}",
                )
            )
        entries.append(PublishSummaryEntry(package_name=name, version=version))

    return Ok(tuple(entries))
