"""Application logger configuration."""
import logging

from bookapp.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
