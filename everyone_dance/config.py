"""Application configuration management."""

import json
import platform
from pathlib import Path
from typing import Any, Optional

from loguru import logger


def _default_data_dir() -> Path:
    """Return the default data directory for the application."""
    if platform.system() == "Windows":
        return Path.home() / "Documents" / "EveryoneDance"
    elif platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "EveryoneDance"
    else:
        return Path.home() / ".config" / "EveryoneDance"


_DEFAULT_CONFIG: dict[str, Any] = {
    "stepmania_dir": "",
    "platform": "",
}


class Config:
    """Singleton application configuration."""

    _instance: Optional["Config"] = None
    _data: dict[str, Any]
    _path: Path
    _data_dir: Path

    def __new__(
        cls, config_path: Optional[Path] = None, data_dir: Optional[Path] = None
    ) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(
        self, config_path: Optional[Path] = None, data_dir: Optional[Path] = None
    ) -> None:
        if self._initialized:  # type: ignore[has-type]
            return
        self._initialized = True
        self._data_dir = data_dir or _default_data_dir()
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._path = config_path or (self._data_dir / "config.json")
        self._data = dict(_DEFAULT_CONFIG)
        self._load()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def stepmania_dir(self) -> str:
        """User-configured StepMania install directory ('' when unset)."""
        return str(self._data.get("stepmania_dir") or "")

    @property
    def platform(self) -> str | None:
        """Platform override, or ``None`` to use the host's platform."""
        return self._data.get("platform") or None

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._save()

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                logger.warning("Config {} is not a JSON object, using defaults", self._path)
                return
            self._data.update(saved)
            logger.info("Configuration loaded from {}", self._path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load config, using defaults: {}", e)

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error("Failed to save config: {}", e)

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None
