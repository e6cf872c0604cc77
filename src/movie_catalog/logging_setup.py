import logging
import os
from typing import Optional

def setup_logging(level: Optional[str] = None) -> None:
    """
    Console logging for the movie catalog service.

    The level comes from the argument (normally Settings.log_level), then the
    LOG_LEVEL env var, then INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
