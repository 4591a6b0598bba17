"""
Run the API server.
Run with: python -m vitals_api
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from vitals_api.config import get_settings

logger = logging.getLogger("vitals_api")


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        missing = ", ".join(str(err["loc"][0]).upper() for err in e.errors() if err["loc"])
        logger.error("Invalid or missing configuration: %s", missing)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "vitals_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
