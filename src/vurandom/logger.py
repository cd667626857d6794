import logging
import os
from typing import Optional

from .config import LOG_LEVEL_ENV

_configured = False


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach the stream handler and apply ``level`` (or VURANDOM_LOG_LEVEL)."""
    global _configured
    root = logging.getLogger("vurandom")
    if not root.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s][%(levelname)s][%(name)s] %(message)s')
        handler.setFormatter(formatter)
        root.addHandler(handler)
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))
    _configured = True
    return root


def get_random_logger(name: str = "vurandom") -> logging.Logger:
    # level is applied on first use only; later calls leave it to the application
    root = logging.getLogger("vurandom")
    if not _configured:
        configure_logging()
    if name == "vurandom":
        return root
    return logging.getLogger(f"vurandom.{name}")
