"""Loguru setup for the locator.

Release builds print INFO and above to stderr.  Development builds
(``EVERYONE_DANCE_DEV``) also print the DEBUG classification details.
The log file always records DEBUG.
"""

import sys
from pathlib import Path

from loguru import logger

from everyone_dance.version import VERSION, is_dev_build

LOG_FILE_NAME = "everyone_dance.log"

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def console_level(dev: bool) -> str:
    return "DEBUG" if dev else "INFO"


def setup_logger(log_dir: Path | None = None, dev: bool | None = None) -> Path:
    """Replace loguru's default sink with a console sink and a log file.

    *log_dir* defaults to ``<Config().data_dir>/logs``; *dev* defaults to
    :func:`everyone_dance.version.is_dev_build`.  Returns the log file path.
    """
    if dev is None:
        dev = is_dev_build()
    if log_dir is None:
        from everyone_dance.config import Config
        log_dir = Config().data_dir / "logs"

    logger.remove()
    logger.add(sys.stderr, level=console_level(dev), format=_CONSOLE_FORMAT, colorize=True)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    logger.add(
        str(log_file),
        level="DEBUG",
        format=_FILE_FORMAT,
        rotation="1 MB",
        retention=3,
        encoding="utf-8",
    )

    logger.debug("Everyone Dance {} logging to {} (dev={})", VERSION, log_file, dev)
    return log_file
