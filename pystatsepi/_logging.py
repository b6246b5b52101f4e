"""Logger factory shared by all pystatsepi modules."""

from __future__ import annotations

import logging
import sys

from pystatsepi._config import settings


def get_logger(module_name: str) -> logging.Logger:
    """
    Returns the logger used across pystatsepi modules.

    Args:
        module_name (str): name of the module.

    Returns:
        logging.Logger: the logger.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(settings.LOG_LEVEL)

    # One handler per logger
    if not logger.handlers:
        formatter = logging.Formatter(
            "[%(asctime)s] - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(formatter)

        logger.addHandler(sh)

    return logger
