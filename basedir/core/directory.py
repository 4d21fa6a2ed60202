"""Search-all, write-one filesystem operations over a base directory.

Lookups (open, open_all, resolve_dir) consult every candidate directory
in priority order, because search entries such as /etc/xdg or
/usr/share may hold a resource the home entry lacks. Mutations (create,
mkdir, remove, ...) only ever touch the home entry, index 0.

When a lookup fails everywhere, the error raised is the one from the
first directory; errors from lower-priority directories are dropped.
"""

from __future__ import annotations

import errno
import os
import shutil
import stat
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import BinaryIO, Literal, TextIO, TypeAlias, overload

from basedir.platform.paths import with_trailing_sep

__all__ = ["DIR_MODE", "BaseDirectory", "StrPath"]

# Mode used when a missing home directory (or a parent created by
# create()) has to be made.
DIR_MODE = 0o700

StrPath: TypeAlias = str | os.PathLike[str]

_READ_MODES = ("r", "rb")


@dataclass(frozen=True, slots=True)
class BaseDirectory:
    """Immutable, non-empty list of base directories, home first."""

    paths: tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.paths:
            raise ValueError("BaseDirectory needs at least one path")

    @classmethod
    def of(cls, paths: Iterable[StrPath]) -> BaseDirectory:
        """Create a BaseDirectory from strings or path-likes."""
        return cls(tuple(Path(p) for p in paths))

    @property
    def home(self) -> Path:
        """The writable, highest-priority directory."""
        return self.paths[0]

    @property
    def search_dirs(self) -> tuple[Path, ...]:
        """Lower-priority directories, consulted only by lookups."""
        return self.paths[1:]

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __getitem__(self, index: int) -> Path:
        return self.paths[index]

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @overload
    def open(self, subpath: StrPath, mode: Literal["rb"] = "rb") -> BinaryIO: ...

    @overload
    def open(self, subpath: StrPath, mode: Literal["r"]) -> TextIO: ...

    def open(self, subpath: StrPath, mode: str = "rb") -> BinaryIO | TextIO:
        """Open subpath for reading from the first directory that has it.

        Raises:
            ValueError: If mode is not "r" or "rb".
            OSError: The first directory's error if no directory has it.
        """
        _check_read_mode(mode)
        errors: list[OSError] = []
        for base in self.paths:
            try:
                return _open_read(_join(base, subpath), mode)
            except OSError as e:
                errors.append(e)
        raise errors[0]

    @overload
    def open_all(self, subpath: StrPath, mode: Literal["rb"] = "rb") -> list[BinaryIO]: ...

    @overload
    def open_all(self, subpath: StrPath, mode: Literal["r"]) -> list[TextIO]: ...

    def open_all(self, subpath: StrPath, mode: str = "rb") -> list[BinaryIO] | list[TextIO]:
        """Open subpath in every directory that has it, in priority order.

        Every directory is tried, whatever happened before. The caller
        owns (and must close) the returned files.

        Raises:
            ValueError: If mode is not "r" or "rb".
            OSError: The first directory's error if nothing could be opened.
        """
        _check_read_mode(mode)
        files: list[BinaryIO | TextIO] = []
        errors: list[OSError] = []
        for base in self.paths:
            try:
                files.append(_open_read(_join(base, subpath), mode))
            except OSError as e:
                errors.append(e)
        if not files:
            raise errors[0]
        return files  # pyright: ignore[reportReturnType]

    def resolve_dir(self, subpath: StrPath) -> str:
        """Return the first base/subpath that is a directory.

        The result always ends with a path separator. A match that is not
        a directory counts as a miss for that base (NotADirectoryError).

        Raises:
            OSError: The first directory's error if no directory matches.
        """
        errors: list[OSError] = []
        for base in self.paths:
            path = _join(base, subpath)
            try:
                st = path.stat()
            except OSError as e:
                errors.append(e)
                continue
            if stat.S_ISDIR(st.st_mode):
                return with_trailing_sep(str(path))
            errors.append(
                NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
            )
        raise errors[0]

    # -------------------------------------------------------------------------
    # Mutations (home directory only)
    # -------------------------------------------------------------------------

    def create(self, subpath: StrPath) -> BinaryIO:
        """Create (or truncate) subpath in the home directory.

        Missing parents, the home directory included, are created with
        DIR_MODE. The file is returned open for binary read/write.
        """
        path = _join(self.home, subpath)
        _make_dirs(path.parent, DIR_MODE)
        return path.open("w+b")

    def mkdir(self, subpath: StrPath, perm: int = DIR_MODE) -> None:
        """Create one new directory level inside the home directory.

        The home directory itself is created with DIR_MODE if missing.

        Raises:
            FileExistsError: If subpath already exists.
            FileNotFoundError: If the parent of subpath is missing.
        """
        _make_dirs(self.home, DIR_MODE)
        _join(self.home, subpath).mkdir(mode=perm)

    def mkdir_all(self, subpath: StrPath, perm: int = DIR_MODE) -> None:
        """Create subpath and any missing parents inside the home directory.

        Directories below home are created with perm; existing ones are
        left alone.
        """
        _make_dirs(self.home, DIR_MODE)
        _make_dirs(_join(self.home, subpath), perm)

    def remove(self, subpath: StrPath) -> None:
        """Remove a file or an empty directory from the home directory."""
        path = _join(self.home, subpath)
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()

    def remove_all(self, subpath: StrPath) -> None:
        """Remove subpath and everything below it from the home directory.

        A missing path is not an error.
        """
        path = _join(self.home, subpath)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)

    def ensure_dir(self, subpath: StrPath, perm: int = DIR_MODE) -> str:
        """Return resolve_dir(subpath), creating it under home if needed.

        The returned path always ends with a path separator.
        """
        try:
            return self.resolve_dir(subpath)
        except OSError:
            self.mkdir_all(subpath, perm)
        return with_trailing_sep(str(_join(self.home, subpath)))


def _check_read_mode(mode: str) -> None:
    if mode not in _READ_MODES:
        raise ValueError(f"invalid mode {mode!r}: expected one of {_READ_MODES}")


def _open_read(path: Path, mode: str) -> BinaryIO | TextIO:
    if mode == "r":
        return path.open("r", encoding="utf-8")
    return path.open("rb")


def _join(base: Path, subpath: StrPath) -> Path:
    """Join subpath below base, even if subpath is absolute."""
    rel = PurePath(subpath)
    if rel.anchor:
        rel = rel.relative_to(rel.anchor)
    return base / rel


def _make_dirs(path: Path, mode: int) -> None:
    """Create path and every missing parent, all with mode."""
    if path.is_dir():
        return
    parent = path.parent
    if parent != path:
        _make_dirs(parent, mode)
    try:
        path.mkdir(mode=mode)
    except FileExistsError:
        if not path.is_dir():
            raise
