import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[int, str, None]) -> int:
    """'debug' / 'WARNING' / 10 -> numeric level; anything unknown is INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "").strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = "INFO") -> logging.Logger:
    logging.basicConfig(format=LOG_FORMAT, level=resolve_level(level))
    logger = logging.getLogger("socialgate")
    logger.debug(f"Logging configured at {logging.getLevelName(resolve_level(level))}")
    return logger
