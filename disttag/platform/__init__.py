"""Platform abstraction layer."""

from .process import ProcessError, Spawner, spawn, which

__all__ = [
    "ProcessError",
    "Spawner",
    "spawn",
    "which",
]
