# File: user_manager/core/logger.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the whole process.

    Modules log through ``logging.getLogger(__name__)``; uvicorn keeps its
    own handlers for access logs.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
