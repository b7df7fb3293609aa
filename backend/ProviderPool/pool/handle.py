"""
Provider Handle

Short-lived token returned by ProviderPool.get_provider().
"""

from __future__ import annotations

import logging
import threading
from types import TracebackType
from typing import Optional, Type

from .base import ProviderConfig, ProviderEntry

logger = logging.getLogger(__name__)


class ProviderHandle:
    """
    A granted slot on one provider.

    Carries the provider id and a copy of its config, plus actions scoped
    to the entry that produced it. Call release() exactly once when the
    work is done, on every exit path, or use the handle as a context
    manager:

        with pool.get_provider() as handle:
            client.post(handle.config.base_url, api_key=handle.config.api_key)

    release() is idempotent. If the provider was removed from the pool in
    the meantime, the handle still points at the detached entry and
    releasing it has no visible effect on the pool.
    """

    def __init__(self, entry: ProviderEntry, lock: threading.Lock):
        self._entry = entry
        self._lock = lock
        self._released = False
        self.id: str = entry.id
        self.config: ProviderConfig = entry.config.model_copy()

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Give the slot back. Safe to call more than once."""
        with self._lock:
            if self._released:
                return
            self._released = True
            self._entry.current_concurrent = max(0, self._entry.current_concurrent - 1)
            remaining = self._entry.current_concurrent
        logger.debug(f"Released provider {self.id[:8]} ({remaining} in flight)")

    def disable(self) -> None:
        """Disable this handle's provider for future selection."""
        with self._lock:
            self._entry.enabled = False
        logger.info(f"Provider {self.id[:8]} disabled through handle")

    def enable(self) -> None:
        """Re-enable this handle's provider."""
        with self._lock:
            self._entry.enabled = True
        logger.info(f"Provider {self.id[:8]} enabled through handle")

    def __enter__(self) -> "ProviderHandle":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "held"
        return f"ProviderHandle(id={self.id[:8]!r}, {state})"
