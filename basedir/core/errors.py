"""Exit codes for the basedir inspection command.

Library calls raise OSError or return Err values; only the CLI turns
them into process exit codes.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (unknown role, bad layout file)
    - 5: I/O error (nothing found, permission denied)
    """

    OK = 0
    USER_ERROR = 1
    IO_ERROR = 5
