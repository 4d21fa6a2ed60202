from __future__ import annotations

from pathlib import Path

import typer

from basedir.cli.context import build_context
from basedir.output.console import Style


def where(
    role: str | None = typer.Argument(None, help="Role to show (default: all roles)"),
    layout: Path | None = typer.Option(None, "--layout", help="TOML file declaring extra roles"),
) -> None:
    """Show the directories searched for each role, home first."""
    ctx = build_context(layout)
    names = ctx.dirs.names() if role is None else [ctx.role_name(role)]

    for name in names:
        directory = ctx.dirs.get(name)
        ctx.console.header(name)
        ctx.console.print(f"  home: {directory.home}")
        for path in directory.search_dirs:
            ctx.console.print(f"  search: {path}", Style.DIM)
