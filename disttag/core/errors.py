"""Exit codes for the dist-tag CLI.

Values are process exit codes and must stay stable:
- 0: Success
- 1: User error (missing --tag, bad --config)
- 2: Environment error (registry CLI not installed)
- 5: I/O error (publish summary missing, unreadable or malformed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
