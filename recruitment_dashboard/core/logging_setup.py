import logging
import logging.handlers
from pathlib import Path

from recruitment_dashboard.core.config import get_settings

LOGGER_NAME = "recruitment_dashboard"


def setup_logging() -> logging.Logger:
    settings = get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    # Avoid adding handlers twice if reloaded
    if logger.handlers:
        return logger

    fmt = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_path), when="D", interval=7, backupCount=10, encoding="utf-8"
        )
        file_handler.suffix = "_%Y-%m-%d"
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
        logger.info("Logging to %s with 7-day rotation", log_path)

    return logger
