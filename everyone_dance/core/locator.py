"""StepMania installation locator.

Given a StepMania install directory, work out which variant it is and
where that variant keeps ``everyone.dance.txt``.

Non-portable installs keep their save data in per-user directories:

    Windows  ``%APPDATA%/StepMania X.Y``
    Linux    ``~/.stepmania-X.Y``
    macOS    ``~/StepMania X.Y``

Portable installs (``portable.ini`` next to the executable) keep the
``Save`` folder inside the install directory itself.

Add support for more versions of StepMania in ``SM_DATA_PATHS`` and in
:func:`classify_variant`.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from everyone_dance.core.host import HostEnvironment, SystemHost
from everyone_dance.models.installation import InstallationInfo, InstallVariant

SM_DATA_NAME = "Save/everyone.dance.txt"
PORTABLE_MARKER = "portable.ini"

# Base data directory per platform
SM_BASE_DIRS: dict[str, Callable[[HostEnvironment], str]] = {
    "win32": lambda host: host.app_data_dir(),
    "linux": lambda host: host.home_dir(),
    "darwin": lambda host: host.home_dir(),
}

# (platform, variant) -> data subdirectory, for non-portable installs
SM_DATA_PATHS: dict[tuple[str, InstallVariant], str] = {
    ("win32", InstallVariant.SM_5_0): "StepMania 5",
    ("win32", InstallVariant.SM_5_1): "StepMania 5.1",
    ("win32", InstallVariant.SM_5_3): "StepMania 5.3",
    ("win32", InstallVariant.CLUB_FANTASTIC): "Club Fantastic StepMania",
    ("linux", InstallVariant.SM_5_0): ".stepmania-5.0",
    ("linux", InstallVariant.SM_5_1): ".stepmania-5.1",
    ("linux", InstallVariant.SM_5_3): ".stepmania-5.3",
    ("darwin", InstallVariant.SM_5_0): "StepMania 5",
    ("darwin", InstallVariant.SM_5_1): "StepMania 5.1",
    ("darwin", InstallVariant.SM_5_3): "StepMania 5.3",
}


def classify_variant(stepmania_dir: str | None) -> InstallVariant:
    """Determine the overall variant of StepMania from its install path."""
    if not stepmania_dir:
        return InstallVariant.UNKNOWN

    lowered = stepmania_dir.lower()
    if "club" in lowered and "fantastic" in lowered:
        return InstallVariant.CLUB_FANTASTIC
    if "5.1" in lowered:
        return InstallVariant.SM_5_1
    if "5.3" in lowered:
        return InstallVariant.SM_5_3
    # Anything else is treated as 5.0.x, whatever the directory is called
    return InstallVariant.SM_5_0


def locate_variant_dir(stepmania_dir: str, variant: InstallVariant) -> str:
    """Apply per-variant adjustments to the install directory.

    5.3 installs are often pointed at the ``Appearance`` sub-folder; the
    save data lives beside it, so the segment is dropped.
    """
    if variant is InstallVariant.SM_5_3:
        return stepmania_dir.replace("Appearance", "")
    return stepmania_dir


def is_portable(variant_dir: str, host: HostEnvironment) -> bool:
    """Check whether a StepMania install runs in portable mode."""
    if not variant_dir:
        return False
    return host.file_exists(f"{variant_dir}/{PORTABLE_MARKER}")


def locate_score_file(
    platform: str,
    variant: InstallVariant,
    variant_dir: str,
    portable: bool,
    host: HostEnvironment,
) -> str | None:
    """Locate ``everyone.dance.txt`` in the install or the user data dirs.

    Returns ``None`` when the platform/variant combination is unknown.
    """
    # Portable installs keep the Save folder next to the executable
    if portable:
        return f"{variant_dir}/{SM_DATA_NAME}"

    variant_name = SM_DATA_PATHS.get((platform, variant))
    base_dir_of = SM_BASE_DIRS.get(platform)
    if variant_name is None or base_dir_of is None:
        return None

    return f"{base_dir_of(host)}/{variant_name}/{SM_DATA_NAME}"


def resolve(
    stepmania_dir: str | None,
    platform: str | None = None,
    host: HostEnvironment | None = None,
) -> InstallationInfo:
    """Analyse a StepMania installation.

    Parameters
    ----------
    stepmania_dir : str, optional
        Path to the StepMania installation.  Empty or ``None`` yields an
        ``UNKNOWN`` variant.
    platform : str, optional
        Platform identifier (``'win32'``, ``'linux'``, ``'darwin'``).
        ``None`` means the host's own platform; any other value not in
        the table (including ``''``) gives no score file.
    host : HostEnvironment, optional
        Source of user directories and file checks.  Defaults to
        :class:`SystemHost`.
    """
    host = host or SystemHost()
    if platform is None:
        platform = host.platform()
    stepmania_dir = stepmania_dir or ""

    variant = classify_variant(stepmania_dir)
    variant_dir = locate_variant_dir(stepmania_dir, variant)
    portable = is_portable(variant_dir, host)
    logger.debug(
        "Classified {!r}: variant={} variant_dir={!r} portable={}",
        stepmania_dir, variant.name, variant_dir, portable,
    )

    score_file = locate_score_file(platform, variant, variant_dir, portable, host)
    if score_file is None:
        logger.info(
            "No score file location known for {} on {}", variant.name, platform
        )
    else:
        logger.info("StepMania {} ({}): score file {}", variant.name, platform, score_file)

    return InstallationInfo(
        platform=platform,
        variant=variant,
        variant_dir=variant_dir,
        is_portable=portable,
        score_file=score_file,
    )
