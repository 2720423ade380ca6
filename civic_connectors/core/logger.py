import logging
import os
from dotenv import load_dotenv

from .utils import redact_key

# charge immédiatement le .env
load_dotenv()


class RedactKeyFilter(logging.Filter):
    """Remplace key=<valeur> par key=*** dans chaque message avant émission."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_logger(name: str) -> logging.Logger:
    """
    Logger standardisé pour les connecteurs.
    Niveau : CIVICINFO_LOG_LEVEL, sinon LOG_LEVEL, sinon INFO.
    La clé API n'apparaît jamais dans les messages (RedactKeyFilter).
    """
    log_level = (os.getenv("CIVICINFO_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger(name)
    if not any(isinstance(f, RedactKeyFilter) for f in logger.filters):
        logger.addFilter(RedactKeyFilter())

    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(handler)
        logger.setLevel(log_level)
    return logger
