"""
Logging helpers.

Checks that report progress take a plain ``log(level, message)`` callable
instead of looking up a global logger. This module provides the no-op
default, an adapter onto the standard logging module, and the
application-wide logging setup driven by configuration.
"""

import logging
import sys
from typing import Callable, Dict, Optional

LogFunc = Callable[[str, str], None]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def null_log(level: str, message: str) -> None:
    """Discard a log line."""


def logger_sink(logger: Optional[logging.Logger] = None) -> LogFunc:
    """
    Adapt a standard library logger to the log(level, message) contract.

    Args:
        logger: Logger to forward to (default: the config_checks logger)

    Returns:
        A callable suitable for the log collaborator of the checks
    """
    target = logger or logging.getLogger("config_checks")

    def log(level: str, message: str) -> None:
        target.log(_LEVELS.get(str(level).upper(), logging.INFO), message)

    return log


def configure_logging(config: Dict):
    """Configure logging from the "logging" section of a configuration."""
    logging_config = config.get("logging", None)
    handlers = [logging.StreamHandler(sys.stdout)]

    if logging_config:
        log_level = logging_config.get("level", "INFO")
        log_file = logging_config.get("file")
        if log_file:
            handlers.insert(0, logging.FileHandler(log_file))

        logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)
        return

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)
