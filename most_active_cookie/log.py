"""Most Active Cookie - Logging setup"""

import logging

from rich.logging import RichHandler

from .output import stderr_console


def setup_logger(name: str, verbose: bool) -> logging.Logger:
    """Send log records to stderr so stdout only carries cookie identifiers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()
    handler = RichHandler(console=stderr_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
