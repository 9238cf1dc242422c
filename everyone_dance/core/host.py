"""Access to the machine the locator runs on.

The locator never touches ``os`` or ``sys`` directly; it is handed a
:class:`HostEnvironment` instead.  :class:`SystemHost` is the real
implementation.

On Windows the Roaming app-data folder is normally exposed through
``%APPDATA%``.  When the variable is missing we ask the Windows Shell
API, and only then fall back to the home directory.
"""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from loguru import logger

# SHGetFolderPath CSIDL_APPDATA (Roaming)
_CSIDL_APPDATA = 0x001A


def _get_windows_appdata_folder() -> str | None:
    """Use the Windows Shell API to retrieve the Roaming app-data path."""
    try:
        import ctypes

        buf = ctypes.create_unicode_buffer(1024)
        # SHGetFolderPathW(hwnd, nFolder, hToken, dwFlags, pszPath)
        result = ctypes.windll.shell32.SHGetFolderPathW(  # type: ignore[attr-defined]
            0, _CSIDL_APPDATA, 0, 0, buf
        )
        if result == 0:  # S_OK
            return buf.value
    except (AttributeError, OSError) as e:
        logger.debug("SHGetFolderPathW failed for RoamingAppData: {}", e)
    return None


class HostEnvironment(ABC):
    """Operations the locator needs from the machine it runs on."""

    @abstractmethod
    def platform(self) -> str:
        """Platform identifier: ``'win32'``, ``'linux'`` or ``'darwin'``."""
        ...

    @abstractmethod
    def app_data_dir(self) -> str:
        """Per-user application data directory."""
        ...

    @abstractmethod
    def home_dir(self) -> str:
        """User home directory."""
        ...

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return whether *path* exists."""
        ...


class SystemHost(HostEnvironment):
    """:class:`HostEnvironment` backed by the running machine."""

    def __init__(self) -> None:
        self._app_data: str | None = None

    def platform(self) -> str:
        return sys.platform

    def app_data_dir(self) -> str:
        """Return ``%APPDATA%`` (Roaming) on Windows, ``~`` elsewhere."""
        if self._app_data is not None:
            return self._app_data

        result: str | None = None
        if self.platform() == "win32":
            result = os.environ.get("APPDATA") or _get_windows_appdata_folder()

        if not result:
            result = self.home_dir()

        self._app_data = result
        logger.debug("App-data directory resolved to: {}", result)
        return result

    def home_dir(self) -> str:
        return str(Path.home())

    def file_exists(self, path: str) -> bool:
        return Path(path).exists()
