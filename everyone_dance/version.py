"""Application version string."""

import os

VERSION_BASE = "2.1.5"

# Desktop package; the browser build sets this to True.
IS_WEB_VERSION = False


def is_dev_build() -> bool:
    """Return whether this is a development build (``EVERYONE_DANCE_DEV``)."""
    return os.environ.get("EVERYONE_DANCE_DEV", "").strip().lower() in ("1", "true", "yes")


def build_version(is_web_version: bool, is_dev: bool) -> str:
    """Append ``-dev`` to the base version for desktop development builds."""
    if not is_web_version and is_dev:
        return VERSION_BASE + "-dev"
    return VERSION_BASE


VERSION = build_version(IS_WEB_VERSION, is_dev_build())
