import logging
from logging.config import dictConfig

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Install a single stream handler on the root logger.
    Safe to call more than once (create_app runs per test client).
    """
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {"handlers": ["console"], "level": (level or settings.LOG_LEVEL).upper()},
        "loggers": {
            # request lines from the SendGrid client are noise at INFO
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    })
    logging.getLogger(__name__).debug("Logging configured")
