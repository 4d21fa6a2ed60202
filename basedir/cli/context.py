from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from basedir.core.config import Layout, load_layout
from basedir.core.errors import ErrorCode
from basedir.core.result import Err
from basedir.core.roles import BaseDirs, Role, init_dirs
from basedir.output.console import ConsoleProtocol, RichConsole, Style
from basedir.platform.detection import Platform, detect_platform


@dataclass(frozen=True, slots=True)
class CLIContext:
    dirs: BaseDirs
    platform: Platform
    console: ConsoleProtocol

    def role_name(self, role: str) -> str:
        """Normalize a role argument, or exit with USER_ERROR if it is unknown.

        Built-in roles match case-insensitively, like BaseDirs.get().
        """
        builtin = Role.from_name(role)
        name = str(builtin) if builtin is not None else role
        names = self.dirs.names()
        if name not in names:
            self.console.error(f"unknown role: {role}")
            self.console.print(f"available: {', '.join(names)}", Style.DIM)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        return name


def build_context(layout_path: Path | None = None) -> CLIContext:
    console = RichConsole()

    layout = Layout()
    if layout_path is not None:
        result = load_layout(layout_path)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        layout = result.value

    platform = detect_platform()
    return CLIContext(
        dirs=init_dirs(platform=platform, extra=layout.roles),
        platform=platform,
        console=console,
    )
