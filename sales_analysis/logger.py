import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from . import settings

# Chatty third-party loggers (requests -> urllib3 on every webhook post).
QUIET_LOGGERS = ("urllib3",)


def setup_logger(name: Optional[str] = None, log_level: Optional[int] = None) -> logging.Logger:
    """
    Sets up the report logger: a bare console stream for the run summary plus a
    rotating file under settings.LOG_DIR with timestamps for later digging.
    The level defaults to settings.LOG_LEVEL.
    """
    if log_level is None:
        log_level = logging.getLevelName(settings.LOG_LEVEL)
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Calling this twice (e.g. main + tests) must not duplicate every line
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_DIR / settings.LOG_FILENAME,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
