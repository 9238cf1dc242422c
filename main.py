"""Everyone Dance score-file locator — entry point."""

import sys

from loguru import logger

from everyone_dance.config import Config
from everyone_dance.core.host import SystemHost
from everyone_dance.core.locator import resolve
from everyone_dance.logger import setup_logger
from everyone_dance.version import VERSION


def main() -> int:
    # ---- 1. Config ----
    config = Config()

    # ---- 2. Logger ----
    setup_logger()
    logger.info("Everyone Dance {} starting…", VERSION)

    # ---- 3. Locate the score file ----
    host = SystemHost()
    info = resolve(config.stepmania_dir, config.platform, host)
    logger.info(
        "Install: variant={} dir={!r} portable={}",
        info.variant.name, info.variant_dir, info.is_portable,
    )

    if info.score_file is None:
        logger.warning("Could not determine the score file location")
        return 1

    if not info.has_score_file(host):
        logger.warning("Score file does not exist yet: {}", info.score_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
