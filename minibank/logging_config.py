"""Logging configuration for minibank."""

import logging
import sys

import minibank.config as cfg


def setup_logging(level: str = cfg.LOG_LEVEL, stream=None) -> logging.Logger:
    """Attach a single formatted handler to the package logger.

    Logs go to stderr by default so they never interleave with the
    notification lines printed on stdout.
    """
    log_level = getattr(logging, str(level).upper(), logging.WARNING)
    logger = logging.getLogger("minibank")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=cfg.LOG_FORMAT, datefmt=cfg.LOG_DATEFMT))
    logger.addHandler(handler)
    return logger
