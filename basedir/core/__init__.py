"""Core types: path lists, base directories, roles and layouts."""

from .config import ConfigError, Layout, load_layout
from .directory import DIR_MODE, BaseDirectory
from .errors import ErrorCode
from .pathlist import PathList, build_path_list
from .result import Err, Ok, Result
from .roles import DEFAULTS, BaseDirs, Role, RoleSpec, build_dir, default_specs, init_dirs

__all__ = [
    # config
    "ConfigError",
    "Layout",
    "load_layout",
    # directory
    "DIR_MODE",
    "BaseDirectory",
    # errors
    "ErrorCode",
    # pathlist
    "PathList",
    "build_path_list",
    # result
    "Err",
    "Ok",
    "Result",
    # roles
    "DEFAULTS",
    "BaseDirs",
    "Role",
    "RoleSpec",
    "build_dir",
    "default_specs",
    "init_dirs",
]
