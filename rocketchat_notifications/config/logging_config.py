"""Logging setup for applications embedding the RocketChat channel."""
import logging
import sys
from typing import Optional, Union

from rocketchat_notifications.config.settings import Config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level; defaults to Config.LOG_LEVEL
    """
    logging.basicConfig(
        level=level if level is not None else Config.LOG_LEVEL,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True
    )
