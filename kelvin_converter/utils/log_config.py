# Logging setup for applications embedding the converter
import logging

from kelvin_converter.config.constants import LOG_FORMAT


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a standard logger for the application.

    Args:
        level (int): Root logging level

    Returns:
        logging.Logger: Configured logger instance
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT
    )
    return logging.getLogger("kelvin_converter")
