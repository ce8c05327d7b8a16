from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("journal.server")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; *level* falls back to INFO when unknown."""
    if logger.handlers or logging.getLogger().handlers:
        return

    resolved = logging.getLevelName((level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # inference calls go through httpx; its per-request INFO lines are noise here
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
