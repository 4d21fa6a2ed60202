"""Ordered candidate path lists built from the environment.

A path list is what one role (config, data, cache, ...) searches: the
home entry first, then the search entries. The environment is read once,
when the list is built.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from basedir.platform.paths import expand_tilde, split_path_list, working_dir

if TYPE_CHECKING:
    from basedir.output.console import ConsoleProtocol

__all__ = ["PathList", "build_path_list"]


class PathList:
    """Ordered list of candidate directories, highest priority first.

    add() silently skips empty strings, so an unset default or an empty
    PATH segment never becomes a candidate.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self.extend(items)

    def add(self, path: str) -> None:
        if path:
            self._items.append(path)

    def extend(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def ensure_not_empty(self) -> None:
        """Fall back to the working directory when nothing was added."""
        if not self._items:
            self._items.append(working_dir())

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathList):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"PathList({self._items!r})"


def build_path_list(
    home_var: str,
    home_default: str,
    dirs_var: str,
    *dirs_defaults: str,
    env: Mapping[str, str] | None = None,
    console: ConsoleProtocol | None = None,
) -> PathList:
    """Build the candidate list for one role.

    Args:
        home_var: Variable holding the home (writable) directory. May be "".
        home_default: Used when home_var is unset or empty. A leading "~/"
            is expanded; the variable's own value never is.
        dirs_var: Variable holding os.pathsep-separated search directories.
            May be "".
        dirs_defaults: Search directories used, as given, when dirs_var is
            unset or has no non-empty segment.
        env: Environment to read (default: os.environ).
        console: Where the home lookup warning goes (default: stderr).

    Returns:
        A non-empty PathList. The working directory (or ".") is the last
        resort when every other source is empty.
    """
    if env is None:
        env = os.environ

    paths = PathList()

    env_home = env.get(home_var, "") if home_var else ""
    if env_home:
        paths.add(env_home)
    else:
        paths.add(expand_tilde(home_default, env, console))

    env_dirs = split_path_list(env.get(dirs_var, "")) if dirs_var else []
    if env_dirs:
        paths.extend(env_dirs)
    else:
        paths.extend(dirs_defaults)

    paths.ensure_not_empty()
    return paths
