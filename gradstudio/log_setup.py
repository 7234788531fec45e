from __future__ import annotations
import logging
import os
import sys
from typing import Optional

from .config import ENV_LOG

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, name: str = "gradstudio") -> logging.Logger:
    lvl_name = (level or os.environ.get(ENV_LOG, "INFO")).upper()
    lvl = getattr(logging, lvl_name, None)
    if not isinstance(lvl, int):
        # names like BASIC_FORMAT are module attributes, not levels
        lvl = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(lvl)
    logger.handlers.clear()
    logger.propagate = False

    sh = logging.StreamHandler(stream=sys.stderr)
    sh.setLevel(lvl)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(sh)
    return logger
