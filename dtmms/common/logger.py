from dtmms.common.environment_constants import LOG_LEVEL
import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEFAULT_LOGGER_NAME = "dtmms"

_logger_initialized = False


def _setup_logger():
    """
    Configure root logging once per process.

    The level comes from the LOG_LEVEL environment variable, case-insensitive;
    unset or unknown values fall back to INFO.
    """
    global _logger_initialized
    if _logger_initialized:
        return

    level_name = os.environ.get(LOG_LEVEL, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT
    )
    _logger_initialized = True


def get_logger(name=DEFAULT_LOGGER_NAME):
    """
    Returns the logger injected into stores, repositories and services.

    Args:
        name (str, optional): Logger name. Defaults to "dtmms".

    Returns:
        logging.Logger: A logger backed by the configured root handler.
    """
    _setup_logger()
    return logging.getLogger(name)
