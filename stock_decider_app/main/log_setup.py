import logging

from config import LOG_FILE, LOG_LEVEL, ensure_log_dir

LOGGER_NAME = "stock_decider"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging() -> logging.Logger:
    """
    File logger for the app. Safe to call on every Streamlit rerun.
    """
    ensure_log_dir()
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(LOG_LEVEL)
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    logger.propagate = False

    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
