from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TagReleaseErrorKind = Literal[
    "missing_tag",
    "summary_missing",
    "summary_unreadable",
    "summary_invalid",
    "registry_cli_missing",
]


@dataclass(frozen=True, slots=True)
class TagReleaseError:
    kind: TagReleaseErrorKind
    message: str
    hint: str | None = None
