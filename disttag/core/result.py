"""Result type for explicit error handling.

Every fallible step of a tagging run (reading the summary, locating the
registry CLI, spawning a process) returns ``Ok(value)`` or ``Err(error)``
instead of raising, so the CLI layer decides exit codes in one place.

Usage:
    match load_publish_summary(path):
        case Ok(entries):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
