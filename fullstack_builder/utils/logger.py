import logging
from typing import Dict, Optional

_LOGGERS: Dict[str, logging.Logger] = {}
_LEVEL = logging.INFO


def get_logger(name: str = "fullstack_builder", level: Optional[int] = None) -> logging.Logger:
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else _LEVEL)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    _LOGGERS[name] = logger
    return logger


def set_level(level: int) -> None:
    """Apply `level` to every logger handed out so far and to future ones."""
    global _LEVEL
    _LEVEL = level
    for logger in _LOGGERS.values():
        logger.setLevel(level)
