"""Layout files: additional roles declared in TOML.

A layout file lets an application add its own roles next to the
built-in ones, each with its own environment variables and defaults:

    [roles.plugins]
    home_var = "MYAPP_PLUGIN_HOME"
    home_default = "~/.local/share/myapp/plugins"
    dirs_var = "MYAPP_PLUGIN_DIRS"
    dirs = ["/usr/share/myapp/plugins"]

Every key is optional. A role with nothing set resolves to the working
directory, like any other empty role.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .roles import Role, RoleSpec
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "ConfigError",
    "Layout",
    "load_layout",
]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a layout file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def _empty_roles() -> dict[str, RoleSpec]:
    return {}


@dataclass(frozen=True, slots=True)
class Layout:
    """Additional roles, by name."""

    roles: Mapping[str, RoleSpec] = field(default_factory=_empty_roles)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Layout:
        """Create a Layout from a mapping (parsed TOML).

        Raises:
            ValueError: If a role is malformed or shadows a built-in role.
        """
        if "roles" in data and get_table(data, "roles") is None:
            raise ValueError("'roles' must be a table")
        roles_table: StrDict = get_table(data, "roles") or {}

        roles: dict[str, RoleSpec] = {}
        for name, value in roles_table.items():
            if Role.from_name(name) is not None:
                raise ValueError(f"role '{name}' is built in and cannot be redefined")
            table = as_str_dict(value)
            if table is None:
                raise ValueError(f"role '{name}' must be a table")
            roles[name] = _role_from_table(name, table)
        return cls(roles=roles)


def _role_from_table(name: str, table: StrDict) -> RoleSpec:
    dirs: list[str] = []
    if "dirs" in table:
        parsed = get_str_list(table, "dirs")
        if parsed is None:
            raise ValueError(f"role '{name}': 'dirs' must be a list of strings")
        dirs = parsed

    return RoleSpec(
        home_var=get_str(table, "home_var") or "",
        home_default=get_str(table, "home_default") or "",
        dirs_var=get_str(table, "dirs_var") or "",
        dirs_defaults=tuple(dirs),
    )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Layout root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Layout file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Layout path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading layout: {e}", path=path))


def load_layout(path: Path) -> Result[Layout, ConfigError]:
    """Load and validate a layout file.

    Args:
        path: Path to the TOML layout file

    Returns:
        Ok(Layout) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Layout.from_dict(result.value))
    except ValueError as e:
        return Err(ConfigError(f"Invalid layout: {e}", path=path))
