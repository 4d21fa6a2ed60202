"""Result type for expected, user-facing failures.

Filesystem operations raise OSError like the standard library does.
Loading a layout file is different: a bad file is an ordinary outcome
the caller reports, so it returns Ok(value) or Err(error).

Usage:
    match load_layout(path):
        case Ok(layout):
            dirs = init_dirs(extra=layout.roles)
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding an error."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
