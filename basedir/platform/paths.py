"""Platform-aware path utilities.

Helpers shared by the base directory builder: home directory lookup,
tilde expansion, PATH-style list splitting and separator handling.
Nothing here is cached; every call reads the environment it is given.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .detection import is_windows

if TYPE_CHECKING:
    from basedir.output.console import ConsoleProtocol

__all__ = [
    "expand_tilde",
    "profile_home",
    "split_path_list",
    "user_home",
    "with_trailing_sep",
    "working_dir",
]


def profile_home(env: Mapping[str, str]) -> str | None:
    """Get the home directory from the current user's profile.

    Uses the password database on Unix and USERPROFILE from env on Windows.
    Returns None when no profile home can be determined.
    """
    if is_windows():
        return env.get("USERPROFILE") or None

    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except KeyError:
        return None


def user_home(
    env: Mapping[str, str] | None = None,
    console: ConsoleProtocol | None = None,
) -> str:
    """Get the user's home directory.

    HOME wins when set and non-empty, then the user profile. If neither
    is available a warning is printed (to stderr by default) and "." is
    returned.
    """
    if env is None:
        env = os.environ

    home_env = env.get("HOME")
    if home_env:
        return home_env

    profile = profile_home(env)
    if profile:
        return profile

    if console is None:
        from basedir.output.console import RichConsole

        console = RichConsole(stderr=True)
    console.warning("basedir: unable to determine home directory")
    return "."


def expand_tilde(
    path: str,
    env: Mapping[str, str] | None = None,
    console: ConsoleProtocol | None = None,
) -> str:
    """Replace a leading "~/" with the user's home directory.

    Only the "~<sep>rest" form is expanded; "~", "~/" and "~user/..."
    are returned unchanged.
    """
    if len(path) > 2 and path[0] == "~" and _is_sep(path[1]):
        return user_home(env, console) + path[1:]
    return path


def split_path_list(value: str, sep: str = os.pathsep) -> list[str]:
    """Split a PATH-style string, dropping empty segments."""
    return [part for part in value.split(sep) if part]


def with_trailing_sep(path: str) -> str:
    """Return path terminated by a directory separator.

    Raises:
        ValueError: If path is empty. Callers never build empty paths.
    """
    if not path:
        raise ValueError("with_trailing_sep: empty path")
    if _is_sep(path[-1]):
        return path
    return path + os.sep


def working_dir() -> str:
    """Get the current working directory, or "." if it is unavailable."""
    try:
        return os.getcwd()
    except OSError:
        return "."


def _is_sep(char: str) -> bool:
    return char == os.sep or (os.altsep is not None and char == os.altsep)
