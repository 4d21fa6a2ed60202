"""Roles, their per-platform defaults, and process start-up initialization.

Call init_dirs() once when the application starts and pass the returned
BaseDirs around. Nothing here keeps module-level state.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from basedir.platform.detection import Platform, detect_platform

from .directory import BaseDirectory
from .pathlist import build_path_list

if TYPE_CHECKING:
    from basedir.output.console import ConsoleProtocol

__all__ = [
    "DEFAULTS",
    "BaseDirs",
    "Role",
    "RoleSpec",
    "build_dir",
    "default_specs",
    "init_dirs",
]


class Role(Enum):
    """What kind of files a base directory holds."""

    CONFIG = "config"
    DATA = "data"
    CACHE = "cache"
    TOOLCHAIN = "toolchain"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Role | None:
        """Look up a role by its lowercase name, or return None."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class RoleSpec:
    """Where the directories of one role come from.

    Either variable name may be empty, meaning there is no variable.
    """

    home_var: str
    home_default: str = ""
    dirs_var: str = ""
    dirs_defaults: tuple[str, ...] = ()

    def build(
        self,
        env: Mapping[str, str] | None = None,
        console: ConsoleProtocol | None = None,
    ) -> BaseDirectory:
        return build_dir(
            self.home_var,
            self.home_default,
            self.dirs_var,
            *self.dirs_defaults,
            env=env,
            console=console,
        )


def build_dir(
    home_var: str,
    home_default: str,
    dirs_var: str,
    *dirs_defaults: str,
    env: Mapping[str, str] | None = None,
    console: ConsoleProtocol | None = None,
) -> BaseDirectory:
    """Build a BaseDirectory from the environment (see build_path_list)."""
    paths = build_path_list(
        home_var, home_default, dirs_var, *dirs_defaults, env=env, console=console
    )
    return BaseDirectory.of(paths)


# -----------------------------------------------------------------------------
# Default tables
# -----------------------------------------------------------------------------

_XDG_CONFIG = RoleSpec("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", ("/etc/xdg",))
_XDG_DATA_DIRS = ("/usr/local/share/", "/usr/share/")
_TOOLCHAIN = RoleSpec("GOROOT", "", "GOPATH")

_LINUX: dict[Role, RoleSpec] = {
    Role.CONFIG: _XDG_CONFIG,
    Role.DATA: RoleSpec("XDG_DATA_HOME", "~/.local/share", "XDG_DATA_DIRS", _XDG_DATA_DIRS),
    Role.CACHE: RoleSpec("XDG_CACHE_HOME", "~/.cache"),
    Role.TOOLCHAIN: _TOOLCHAIN,
}

DEFAULTS: Mapping[Platform, Mapping[Role, RoleSpec]] = {
    Platform.LINUX: _LINUX,
    Platform.MACOS: {
        Role.CONFIG: _XDG_CONFIG,
        Role.DATA: RoleSpec(
            "XDG_DATA_HOME", "~/Library/Application Support", "XDG_DATA_DIRS", _XDG_DATA_DIRS
        ),
        Role.CACHE: RoleSpec("XDG_CACHE_HOME", "~/Library/Caches"),
        Role.TOOLCHAIN: _TOOLCHAIN,
    },
    Platform.WINDOWS: {
        Role.CONFIG: RoleSpec("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS"),
        Role.DATA: RoleSpec("XDG_DATA_HOME", "~/.local/share", "XDG_DATA_DIRS"),
        Role.CACHE: RoleSpec("XDG_CACHE_HOME", "~/.cache"),
        Role.TOOLCHAIN: _TOOLCHAIN,
    },
    # Other Unix-likes follow the XDG layout.
    Platform.UNKNOWN: _LINUX,
}


def default_specs(platform: Platform | None = None) -> Mapping[Role, RoleSpec]:
    """Get the default role table for platform (default: the running one)."""
    if platform is None:
        platform = detect_platform()
    return DEFAULTS[platform]


# -----------------------------------------------------------------------------
# Initialization
# -----------------------------------------------------------------------------


def _empty_extra() -> dict[str, BaseDirectory]:
    """Factory for empty extra roles (helps type inference)."""
    return {}


@dataclass(frozen=True, slots=True)
class BaseDirs:
    """One BaseDirectory per role, resolved at start-up."""

    config: BaseDirectory
    data: BaseDirectory
    cache: BaseDirectory
    toolchain: BaseDirectory
    extra: Mapping[str, BaseDirectory] = field(default_factory=_empty_extra)

    def get(self, role: Role | str) -> BaseDirectory:
        """Look up a directory by Role, built-in role name, or extra role name.

        Raises:
            KeyError: If no such role exists.
        """
        if isinstance(role, str):
            builtin = Role.from_name(role)
            if builtin is None:
                return self.extra[role]
            role = builtin
        match role:
            case Role.CONFIG:
                return self.config
            case Role.DATA:
                return self.data
            case Role.CACHE:
                return self.cache
            case Role.TOOLCHAIN:
                return self.toolchain

    def names(self) -> list[str]:
        """All role names, built-in roles first."""
        return [str(r) for r in Role] + sorted(self.extra)


def init_dirs(
    *,
    env: Mapping[str, str] | None = None,
    platform: Platform | None = None,
    extra: Mapping[str, RoleSpec] | None = None,
    console: ConsoleProtocol | None = None,
) -> BaseDirs:
    """Resolve every role from a single snapshot of the environment.

    Args:
        env: Environment to read (default: a copy of os.environ).
        platform: Default table to use (default: the running platform).
        extra: Additional roles, usually from a layout file.
        console: Where diagnostics go (default: stderr).

    Raises:
        ValueError: If an extra role reuses a built-in role name.
    """
    extra = extra or {}
    for name in extra:
        if Role.from_name(name) is not None:
            raise ValueError(f"role '{name}' is built in and cannot be redefined")

    if env is None:
        env = dict(os.environ)

    specs = default_specs(platform)
    return BaseDirs(
        config=specs[Role.CONFIG].build(env, console),
        data=specs[Role.DATA].build(env, console),
        cache=specs[Role.CACHE].build(env, console),
        toolchain=specs[Role.TOOLCHAIN].build(env, console),
        extra={name: spec.build(env, console) for name, spec in extra.items()},
    )
