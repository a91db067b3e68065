"""Stdlib logging setup for the repository, guard and route loggers."""

import logging
import sys

from blog.config import Settings

# Format shared by every handler on the root logger
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    # Tests assert on behavior, not on log noise
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route all loggers to stdout at a level chosen from the environment."""
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Request lines are already traced by the FastAPI instrumentation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # multipart parsing logs every field at DEBUG
    logging.getLogger("multipart").setLevel(logging.INFO)
    logging.getLogger("blog").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured (environment=%s, level=%s, content_root=%s)",
        settings.environment,
        logging.getLevelName(level),
        settings.content.root,
    )
