"""Hunger Pool - Command Line Entrypoint."""

import logging
import random
import sys

from hunger_pool.cli.session import Session
from hunger_pool.config import configure_logging, get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings)

    rng = random.Random(settings.rng_seed)
    if settings.rng_seed is not None:
        logger.info("Using fixed random seed %d", settings.rng_seed)

    Session(out=sys.stdout, rng=rng).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
