"""
Logging setup for loxexpr.

Library modules only ever call logging.getLogger(__name__); a handler is
installed here, once, by the command line entry point.
"""

import logging

ROOT_LOGGER = "loxexpr"


def initialize(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and return it."""
    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
