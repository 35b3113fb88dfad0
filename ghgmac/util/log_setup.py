"""
Logging setup for model runs. Modules log through logging.getLogger(__name__) below the
"ghgmac" logger; this configures its handlers from a logging config file.
"""

import logging
import logging.config
import os

DEFAULT_LOGGER_CONF = os.path.join(
    os.path.dirname(os.path.realpath(__file__)), "logger.conf"
)


def configure_logging(config_path=None, level=None):
    """
    Loads the logging configuration, by default the logger.conf shipped next to this module.
    level overrides the level of the "ghgmac" logger.
    """
    if config_path is None:
        config_path = DEFAULT_LOGGER_CONF

    logging.config.fileConfig(config_path, disable_existing_loggers=False)

    logger = logging.getLogger("ghgmac")
    if level is not None:
        logger.setLevel(level)
    return logger
