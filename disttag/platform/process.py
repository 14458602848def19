"""Subprocess spawning with Result-based error handling.

This is the only module that starts processes. ``spawn`` starts a
process and returns its handle immediately; it never waits, captures
output, or inspects the exit code.

Usage:
    match spawn(["npm", "dist-tag", "add", "pkg@1.0.0", "latest"], cwd=root):
        case Ok(proc):
            handles.append(proc)
        case Err(error):
            console.warning(str(error))
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from disttag.core.result import Err, Ok, Result

__all__ = ["ProcessError", "Spawner", "spawn", "which"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A process that could not be started.

    Attributes:
        command: The command that was attempted.
        reason: OS error text.
    """

    command: tuple[str, ...]
    reason: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} could not start ({self.reason})"


type Spawner = Callable[[list[str], Path], Result[subprocess.Popen[str], ProcessError]]


def spawn(cmd: list[str], cwd: Path) -> Result[subprocess.Popen[str], ProcessError]:
    """Start ``cmd`` in ``cwd`` without waiting for it.

    stdout and stderr are inherited from the current process, in text mode.

    Returns:
        Ok(Popen) once the process is started, Err(ProcessError) if the OS
        refused to start it.
    """
    try:
        proc = subprocess.Popen(cmd, cwd=str(cwd), text=True, encoding="utf-8")
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), reason=str(e)))
    return Ok(proc)


def which(cmd: str) -> str | None:
    """Resolve ``cmd`` on PATH (absolute paths are checked as-is)."""
    return shutil.which(cmd)
