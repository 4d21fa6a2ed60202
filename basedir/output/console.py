"""Console output abstraction.

Diagnostics (for example the home directory fallback warning) and the
inspection CLI write through ConsoleProtocol, so library code never
depends on Rich directly and tests can capture what would be printed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()  # Red, error message
    WARNING = auto()  # Yellow, warning message
    DIM = auto()  # Search (non-home) entries
    HEADER = auto()  # Role name

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...


class RichConsole:
    """Console implementation using Rich library.

    Pass stderr=True for diagnostics that must not mix with program output.
    """

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        # soft_wrap keeps long paths on one line.
        self._console = Console(stderr=stderr, highlight=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
            Style.HEADER: "blue bold",
        }

    @property
    def is_stderr(self) -> bool:
        return self._console.stderr

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        # Paths may contain "[", which Rich would parse as markup.
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def error(self, message: str) -> None:
        self.print(f"error: {message}", Style.ERROR)

    def warning(self, message: str) -> None:
        self.print(f"warning: {message}", Style.WARNING)

    def header(self, message: str) -> None:
        self.print(message, Style.HEADER)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        """Check if any error was printed."""
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        """Check if any warning was printed."""
        return any(o.style == Style.WARNING for o in self.outputs)

    def count(self, style: Style) -> int:
        """Count outputs with a specific style."""
        return sum(1 for o in self.outputs if o.style == style)
