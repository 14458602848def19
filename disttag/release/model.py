from __future__ import annotations

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PublishSummaryEntry:
    """One package/version pair from the publish summary."""

    package_name: str
    version: str

    @property
    def spec(self) -> str:
        return f"{self.package_name}@{self.version}"


@dataclass(frozen=True, slots=True)
class DistTagInvocation:
    """A tagging command that was started.

    ``process`` is the live handle; the runner never waits on it.
    """

    entry: PublishSummaryEntry
    command: tuple[str, ...]
    process: subprocess.Popen[str]


@dataclass(frozen=True, slots=True)
class DistTagRun:
    tag: str
    issued: tuple[DistTagInvocation, ...]
    spawn_failed: tuple[PublishSummaryEntry, ...] = ()
