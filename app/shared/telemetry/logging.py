"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings

# Third-party loggers that are chatty at DEBUG (request bodies, retries, pool events).
_QUIET_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "httpcore")


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Client libraries stay at WARNING.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
