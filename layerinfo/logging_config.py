# -*- coding: utf-8 -*-
"""Sets up the package logger.

Library modules only call ``logging.getLogger(__name__)``; nothing is printed to the
console until an application calls :func:`setup_logging`.
"""

import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """Configure the 'layerinfo' logger.

    Parameters:
    -----------
    level : int
        Logging level (e.g. logging.DEBUG, logging.INFO)
    log_file : str, optional
        Path to save logs to a file.

    Returns:
    --------
    logger : logging.Logger
        The configured package logger
    """
    logger = logging.getLogger("layerinfo")
    logger.setLevel(level)

    # avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
