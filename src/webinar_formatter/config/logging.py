"""Application logging setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"


def configure_logging(level: str = "INFO", fmt: str = LOG_FORMAT) -> None:
    """Configure the root logger once for the whole process.

    Unknown level names fall back to INFO rather than failing startup.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=fmt, force=True)
    # uvicorn installs its own handlers; keep its access log at our level
    logging.getLogger("uvicorn.access").setLevel(resolved)


__all__ = ["LOG_FORMAT", "configure_logging"]
