"""
Logging setup for the Streamlit entry point.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the package logger once.

    Streamlit re-executes the script on every interaction, so the handler is
    only attached the first time.
    """
    package_logger = logging.getLogger("vessel_trail")
    package_logger.setLevel(level.upper())
    if package_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
