import logging
import os
from typing import Optional

from .config import EngineConfig


def setup_logging(level: Optional[str] = None) -> None:
    log_level = (level or os.getenv("LOG_LEVEL") or EngineConfig.LOG_LEVEL).upper()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)
