"""
Logging setup for the PharmaGuard service.
Imported once by the application entry point.
"""

import logging
from typing import Optional

from pharmaguard.services.pharmacogenomics.config import get_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None):
    """Configure root logging from the service configuration."""
    level = (level or get_config().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("pharmaguard").setLevel(level)


configure_logging()
