"""Pytest configuration for the test suite."""

from __future__ import annotations

import pytest

from everyone_dance.config import Config
from everyone_dance.core.host import HostEnvironment


class FakeHost(HostEnvironment):
    """In-memory host with fixed directories and a set of existing files."""

    def __init__(
        self,
        platform: str = "linux",
        app_data: str = "C:/Users/player/AppData/Roaming",
        home: str = "/home/player",
        files: set[str] | None = None,
    ) -> None:
        self._platform = platform
        self._app_data = app_data
        self._home = home
        self.files = set(files or ())
        self.checked: list[str] = []

    def platform(self) -> str:
        return self._platform

    def app_data_dir(self) -> str:
        return self._app_data

    def home_dir(self) -> str:
        return self._home

    def file_exists(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.files


@pytest.fixture
def host() -> FakeHost:
    """Return a non-portable fake host."""
    return FakeHost()


@pytest.fixture
def config(tmp_path):
    """Return a fresh Config rooted in a temporary data directory."""
    Config.reset()
    cfg = Config(data_dir=tmp_path / "data")
    yield cfg
    Config.reset()
