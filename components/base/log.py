"""
Logging setup shared by the API server and the CLI.
"""

import logging

from components.base.config import resolve_log_level

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
    logging.getLogger("components").setLevel(resolve_log_level(level))
