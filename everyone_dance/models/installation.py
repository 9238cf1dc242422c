"""Data model for StepMania installations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from everyone_dance.core.host import HostEnvironment


class InstallVariant(str, Enum):
    """Overall variant of a StepMania install.

    Generally breaks down into Major.Minor version, or forks of these
    for Club Fantastic-like installations.
    """

    UNKNOWN = "unknown"
    SM_5_0 = "5.0"
    SM_5_1 = "5.1"
    # 5.2 was never released
    SM_5_3 = "5.3"
    CLUB_FANTASTIC = "club_fantastic"


@dataclass(frozen=True)
class InstallationInfo:
    """Result of analysing a StepMania installation directory."""

    platform: str
    """Platform identifier the paths were resolved for (e.g. 'win32')."""

    variant: InstallVariant
    """Detected install variant."""

    variant_dir: str
    """Install directory after per-variant adjustments."""

    is_portable: bool = False
    """Whether ``portable.ini`` sits next to the executable."""

    score_file: str | None = None
    """Path to ``everyone.dance.txt``, or ``None`` for unknown combinations."""

    def has_score_file(self, host: HostEnvironment) -> bool:
        """Return whether the resolved score file currently exists."""
        if self.score_file is None:
            return False
        return host.file_exists(self.score_file)
