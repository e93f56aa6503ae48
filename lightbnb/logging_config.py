"""
Logging setup shared by the command line tools and host applications.
"""

import logging
from typing import Optional

from lightbnb.config import Settings, settings as default_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.
    
    Debug mode forces DEBUG level so that every statement sent to the store is logged.
    """
    settings = settings or default_settings
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    
    # SQLAlchemy echoes statements itself in debug mode; keep its pool chatter down
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
