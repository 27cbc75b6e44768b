"""
Cinema-wide configuration.

There is exactly one ``CinemaConfig`` per process. Call ``init_config`` once
at startup to set it up explicitly; ``get_config`` hands out the same
instance everywhere else and creates it with defaults if nobody did.

Creation is guarded by a lock, so concurrent first calls still produce a
single instance. Mutating the settings from several threads at once is not
synchronized and is up to the caller.
"""

import logging
import threading
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CinemaConfig(BaseModel):
    """Global cinema settings."""

    name: str | None = None
    screen_count: int = 0

    def get_name(self) -> Optional[str]:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_screen_count(self) -> int:
        return self.screen_count

    def set_screen_count(self, screen_count: int) -> None:
        # zero and negative counts are accepted as-is
        self.screen_count = screen_count


_instance: Optional[CinemaConfig] = None
_lock = threading.Lock()


def get_config() -> CinemaConfig:
    """Return the process-wide configuration, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = CinemaConfig()
                logger.debug("Created cinema configuration")
    return _instance


def init_config(name: Optional[str] = None, screen_count: Optional[int] = None) -> CinemaConfig:
    """
    Initialize the process-wide configuration at startup.

    Only the settings that are passed are applied; the returned object is
    always the one ``get_config`` returns.
    """
    config = get_config()
    if name is not None:
        config.set_name(name)
    if screen_count is not None:
        config.set_screen_count(screen_count)
    logger.info(f"Cinema configured: {config.name} ({config.screen_count} screens)")
    return config
