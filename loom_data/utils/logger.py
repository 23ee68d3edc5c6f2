"""Logging setup for the `loom_data` logger hierarchy.

Every module logs through `logging.getLogger(__name__)`; this module only
installs the handler and formatter on the package root logger.
"""

import logging

from loom_data.settings import LoomDataSettings, get_settings

LOGGER_NAME = "loom_data"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FORMAT = "[%(asctime)s %(levelname)s %(name)s] - %(message)s"

_HANDLER_NAME = "loom_data_handler"


def configure_logging(settings: LoomDataSettings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Calling it again replaces the handler installed by a previous call instead of
    stacking a new one.

    Args:
        settings (LoomDataSettings | None): Settings to use, the cached environment
            settings when omitted.

    Returns:
        logging.Logger: The configured package logger.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=TIMESTAMP_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(settings.logging_level)
    return logger
