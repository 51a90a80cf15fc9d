import logging
import sys

from core.config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler = None


def _get_handler() -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return _handler


def get_logger(name: str) -> logging.Logger:
    """
    모듈 단위 logger 생성 (handler는 한 번만 붙임)
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_get_handler())
        logger.setLevel(settings.LOG_LEVEL.upper())
    return logger
