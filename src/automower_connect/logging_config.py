"""Colored console logging for the automower-connect command."""

import logging

import colorlog

LOG_FORMAT = (
    "%(log_color)s%(asctime)s %(levelname)-8s%(reset)s "
    "%(blue)s%(name)s%(reset)s %(message)s"
)
DATE_FORMAT = "%H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logging(level: int = logging.INFO) -> logging.Handler:
    """Log to stderr with colors and return the handler in use.

    An application which configured the root logger before keeps its
    handlers, only the level is changed.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.handlers:
        return root_logger.handlers[0]
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS
        )
    )
    root_logger.addHandler(handler)
    return handler
