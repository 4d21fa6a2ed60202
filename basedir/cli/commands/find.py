from __future__ import annotations

from pathlib import Path

import typer

from basedir.cli.context import build_context
from basedir.core.errors import ErrorCode


def find(
    role: str = typer.Argument(..., help="Role to search (config, data, cache, ...)"),
    subpath: str = typer.Argument(..., help="Path relative to each base directory"),
    layout: Path | None = typer.Option(None, "--layout", help="TOML file declaring extra roles"),
) -> None:
    """Print where SUBPATH is found for ROLE: a directory, or the first file."""
    ctx = build_context(layout)
    directory = ctx.dirs.get(ctx.role_name(role))
    try:
        found = directory.resolve_dir(subpath)
    except OSError:
        try:
            with directory.open(subpath) as f:
                found = str(f.name)
        except OSError as e:
            ctx.console.error(f"{subpath}: {e.strerror or e}")
            raise typer.Exit(code=int(ErrorCode.IO_ERROR)) from e

    ctx.console.print(found)
