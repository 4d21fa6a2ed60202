"""Platform abstraction layer."""

from .detection import (
    Platform,
    detect_platform,
    is_windows,
)
from .paths import (
    expand_tilde,
    profile_home,
    split_path_list,
    user_home,
    with_trailing_sep,
    working_dir,
)

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "is_windows",
    # paths
    "expand_tilde",
    "profile_home",
    "split_path_list",
    "user_home",
    "with_trailing_sep",
    "working_dir",
]
