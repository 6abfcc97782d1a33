"""Logging configuration for the API and the management script."""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Libraries that log every request or statement at INFO
NOISY_LOGGERS = ('urllib3', 'httpx', 'sqlalchemy.engine')


def setup_logging(level: int = logging.INFO) -> None:
    """Send records to stdout; calling it again does not add a second handler."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(getattr(handler, '_event_overview', False) for handler in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._event_overview = True
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
