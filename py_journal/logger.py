import logging
import os

DEFAULT_LOG_DIR = "logs"
LOG_FILE_NAME = "journal.log"
JOURNAL_LOGGER = "journal"


def get_logger(name: str = JOURNAL_LOGGER, log_dir: str = DEFAULT_LOG_DIR, level: str = "INFO") -> logging.Logger:
    """
    Returns a configured journal logger writing to <log_dir>/journal.log.
    Child loggers (e.g. 'journal.source') share the parent's handler.
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME), mode='a', encoding='utf-8')
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    file_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.propagate = False # Keep stdout clean for bot mode

    return logger


def log_event(actor: str, message: str):
    """
    Helper to log an event in a consistent format.
    Actors: USER, CLI, SYSTEM
    """
    logger = logging.getLogger(JOURNAL_LOGGER)
    logger.info(f"[{actor}] {message}")

    for handler in logger.handlers:
        handler.flush()
