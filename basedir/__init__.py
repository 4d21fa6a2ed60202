"""XDG-style base directories: resolve them once, then search all, write one.

    from basedir import init_dirs

    dirs = init_dirs()
    with dirs.config.open("myapp/settings.toml") as f:
        ...
    cache_dir = dirs.cache.ensure_dir("myapp", 0o755)
"""

from basedir.core import (
    DIR_MODE,
    BaseDirectory,
    BaseDirs,
    ConfigError,
    Layout,
    PathList,
    Role,
    RoleSpec,
    build_dir,
    build_path_list,
    init_dirs,
    load_layout,
)

__version__ = "0.1.0"

__all__ = [
    "DIR_MODE",
    "BaseDirectory",
    "BaseDirs",
    "ConfigError",
    "Layout",
    "PathList",
    "Role",
    "RoleSpec",
    "build_dir",
    "build_path_list",
    "init_dirs",
    "load_layout",
    "__version__",
]
