"""Tests for basedir.core.pathlist module."""

from __future__ import annotations

import os

import pytest

from basedir.core.pathlist import PathList, build_path_list
from basedir.output.console import MockConsole
from basedir.platform import paths


def _sep_join(*parts: str) -> str:
    return os.pathsep.join(parts)


class TestPathList:
    """Test the append-if-non-empty list."""

    def test_add_skips_empty(self) -> None:
        p = PathList()
        p.add("")
        p.add("/a")
        p.add("")
        assert list(p) == ["/a"]

    def test_keeps_order(self) -> None:
        assert list(PathList(["/b", "", "/a"])) == ["/b", "/a"]

    def test_ensure_not_empty_uses_cwd(self) -> None:
        p = PathList()
        p.ensure_not_empty()
        assert list(p) == [os.getcwd()]

    def test_ensure_not_empty_leaves_non_empty_alone(self) -> None:
        p = PathList(["/a"])
        p.ensure_not_empty()
        assert list(p) == ["/a"]

    def test_sequence_protocol(self) -> None:
        p = PathList(["/a", "/b"])
        assert len(p) == 2
        assert p[0] == "/a"
        assert p.as_tuple() == ("/a", "/b")
        assert p == PathList(["/a", "/b"])
        assert repr(p) == "PathList(['/a', '/b'])"


class TestHomeResolution:
    """Test how the home (index 0) entry is chosen."""

    def test_env_home_used_verbatim(self) -> None:
        env = {"XDG_CONFIG_HOME": "/tmp/cfg", "HOME": "/home/u"}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", env=env)
        assert result[0] == "/tmp/cfg"

    def test_env_home_is_not_tilde_expanded(self) -> None:
        env = {"XDG_CONFIG_HOME": "~/cfg", "HOME": "/home/u"}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "", env=env)
        assert result[0] == "~/cfg"

    def test_default_is_tilde_expanded(self) -> None:
        env = {"HOME": "/home/u"}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", env=env)
        assert result[0] == "/home/u/.config"

    def test_empty_env_home_uses_default(self) -> None:
        env = {"XDG_CONFIG_HOME": "", "HOME": "/home/u"}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "", env=env)
        assert list(result) == ["/home/u/.config"]

    def test_missing_home_degrades_to_dot(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(paths, "profile_home", lambda _env: None)
        console = MockConsole()

        result = build_path_list("XDG_CACHE_HOME", "~/.cache", "", env={}, console=console)

        assert list(result) == ["./.cache"]
        assert console.has_warning()


class TestSearchResolution:
    """Test how search entries are chosen."""

    def test_defaults_used_when_unset(self) -> None:
        env = {"HOME": "/home/u"}
        result = build_path_list(
            "XDG_DATA_HOME", "~/.local/share", "XDG_DATA_DIRS",
            "/usr/local/share/", "/usr/share/",
            env=env,
        )
        assert list(result) == ["/home/u/.local/share", "/usr/local/share/", "/usr/share/"]

    def test_env_dirs_replace_defaults(self) -> None:
        env = {"HOME": "/home/u", "XDG_CONFIG_DIRS": _sep_join("/a", "/b")}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", "/etc/xdg", env=env)
        assert list(result) == ["/home/u/.config", "/a", "/b"]

    def test_trailing_empty_segment_dropped(self) -> None:
        env = {"XDG_CONFIG_HOME": "/tmp/cfg", "XDG_CONFIG_DIRS": _sep_join("/a", "/b", "")}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", "/etc/xdg", env=env)
        assert list(result)[1:] == ["/a", "/b"]

    def test_empty_env_dirs_use_defaults(self) -> None:
        env = {"XDG_CONFIG_HOME": "/tmp/cfg", "XDG_CONFIG_DIRS": ""}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", "/etc/xdg", env=env)
        assert list(result) == ["/tmp/cfg", "/etc/xdg"]

    def test_separator_only_env_dirs_use_defaults(self) -> None:
        env = {"XDG_CONFIG_HOME": "/tmp/cfg", "XDG_CONFIG_DIRS": _sep_join("", "", "")}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", "/etc/xdg", env=env)
        assert list(result) == ["/tmp/cfg", "/etc/xdg"]

    def test_defaults_are_not_tilde_expanded(self) -> None:
        env = {"HOME": "/home/u"}
        result = build_path_list("X_HOME", "~/h", "X_DIRS", "~/shared", env=env)
        assert list(result) == ["/home/u/h", "~/shared"]

    def test_empty_defaults_are_skipped(self) -> None:
        env = {"XDG_CONFIG_HOME": "/tmp/cfg"}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "XDG_CONFIG_DIRS", "", env=env)
        assert list(result) == ["/tmp/cfg"]

    def test_no_dirs_variable(self) -> None:
        env = {"HOME": "/home/u", "": "/should/not/be/read"}
        result = build_path_list("XDG_CACHE_HOME", "~/.cache", "", env=env)
        assert list(result) == ["/home/u/.cache"]


class TestNeverEmpty:
    """The result always has at least one entry."""

    def test_empty_home_default_promotes_first_search_dir(self) -> None:
        env = {"GOPATH": _sep_join("/go1", "/go2")}
        result = build_path_list("GOROOT", "", "GOPATH", env=env)
        assert list(result) == ["/go1", "/go2"]

    def test_everything_empty_uses_cwd(self) -> None:
        result = build_path_list("GOROOT", "", "GOPATH", env={})
        assert list(result) == [os.getcwd()]

    def test_everything_empty_and_no_cwd_uses_dot(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail_getcwd() -> str:
            raise FileNotFoundError("cwd removed")

        monkeypatch.setattr(os, "getcwd", fail_getcwd)
        result = build_path_list("GOROOT", "", "GOPATH", env={})
        assert list(result) == ["."]

    def test_environment_is_read_once(self) -> None:
        env = {"XDG_CONFIG_HOME": "/first"}
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "", env=env)
        env["XDG_CONFIG_HOME"] = "/second"
        assert result[0] == "/first"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", "/from/environ")
        result = build_path_list("XDG_CONFIG_HOME", "~/.config", "")
        assert result[0] == "/from/environ"
