"""Root logging setup for the command-line entry points.

Modules log through ``logging.getLogger(__name__)``; this only installs the
root handler and level. uvicorn configures its own loggers on top.
"""

import logging
import os


def configure_logging() -> logging.Logger:
    """Configure the root logger from LOG_LEVEL (default INFO) and return it."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level_name, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return logging.getLogger()
