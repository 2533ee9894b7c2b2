from __future__ import annotations
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("docexplainer")


def resolve_level(name: str) -> int:
    """Numeric level for a name like "debug"; unknown names fall back to INFO."""
    level = getattr(logging, (name or "").strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def set_level(level: str) -> None:
    logger.setLevel(resolve_level(level))


if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    set_level(os.getenv("LOG_LEVEL", "INFO"))
