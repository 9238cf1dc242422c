"""Tests for the system host environment."""

import sys
from pathlib import Path

import pytest

from everyone_dance.core import host as host_module
from everyone_dance.core.host import SystemHost


def test_home_dir_matches_pathlib():
    assert SystemHost().home_dir() == str(Path.home())


def test_platform_matches_sys(monkeypatch):
    monkeypatch.setattr(host_module.sys, "platform", "darwin")
    assert SystemHost().platform() == "darwin"


def test_file_exists(tmp_path):
    marker = tmp_path / "portable.ini"
    host = SystemHost()
    assert host.file_exists(str(marker)) is False
    marker.write_text("")
    assert host.file_exists(str(marker)) is True


def test_app_data_is_home_outside_windows(monkeypatch):
    monkeypatch.setattr(host_module.sys, "platform", "linux")
    monkeypatch.setenv("APPDATA", "/should/not/be/used")
    host = SystemHost()
    assert host.app_data_dir() == host.home_dir()


def test_app_data_from_environment_on_windows(monkeypatch):
    monkeypatch.setattr(host_module.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", "C:/Users/player/AppData/Roaming")
    assert SystemHost().app_data_dir() == "C:/Users/player/AppData/Roaming"


def test_app_data_falls_back_to_shell_api(monkeypatch):
    monkeypatch.setattr(host_module.sys, "platform", "win32")
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr(
        host_module, "_get_windows_appdata_folder", lambda: "C:/Roaming"
    )
    assert SystemHost().app_data_dir() == "C:/Roaming"


def test_app_data_falls_back_to_home(monkeypatch):
    monkeypatch.setattr(host_module.sys, "platform", "win32")
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr(host_module, "_get_windows_appdata_folder", lambda: None)
    host = SystemHost()
    assert host.app_data_dir() == host.home_dir()


def test_app_data_is_cached(monkeypatch):
    monkeypatch.setattr(host_module.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", "C:/first")
    host = SystemHost()
    assert host.app_data_dir() == "C:/first"
    monkeypatch.setenv("APPDATA", "C:/second")
    assert host.app_data_dir() == "C:/first"


@pytest.mark.skipif(sys.platform == "win32", reason="ctypes.windll exists on Windows")
def test_shell_api_unavailable_returns_none():
    assert host_module._get_windows_appdata_folder() is None
