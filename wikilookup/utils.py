"""Utility functions"""

import logging

from .config import config


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Setup logging configuration"""
    log_level = "DEBUG" if verbose else config.get("logging.level", "WARNING")
    log_format = config.get(
        "logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.WARNING),
        format=log_format,
    )

    return logging.getLogger("wikilookup")
