import logging
import os
import sys
from . import cli, __version__

LOGGING_LEVEL = logging.DEBUG if os.environ.get("EXPRTEX_DEBUG") == "1" else logging.INFO

if __name__ == "__main__":
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")

    handler = logging.StreamHandler()
    handler.setLevel(LOGGING_LEVEL)
    handler.setFormatter(fmt)

    logger = logging.getLogger("exprtex")
    logger.setLevel(LOGGING_LEVEL)
    logger.addHandler(handler)

    # aiohttp access gets separate handler for different format since it already has enough info
    ah_handler = logging.StreamHandler()
    ah_handler.setLevel(LOGGING_LEVEL)
    ah_logger = logging.getLogger("aiohttp.access")
    ah_logger.setLevel(LOGGING_LEVEL)
    ah_logger.addHandler(ah_handler)

    sys.exit(cli.main(version=__version__))
