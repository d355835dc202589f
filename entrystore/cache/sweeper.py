"""
Periodic Expiry Sweeper

The store never sweeps itself. Hosts running an asyncio event loop can
use ExpirySweeper to call EntryStore.cleanup_expired() on a fixed
interval.

Usage:
    store = EntryStore(max_size=5000)
    sweeper = ExpirySweeper(store, interval=30)
    await sweeper.start()
    ...
    await sweeper.stop()
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from ..config.settings import settings
from .store import EntryStore

logger = logging.getLogger(__name__)


class ExpirySweeper:
    """
    Background task that sweeps expired keys from an EntryStore.

    Attributes:
        store: The EntryStore being swept
        interval: Seconds between sweeps
    """

    def __init__(self, store: EntryStore, interval: float = None):
        """
        Initialize the sweeper.

        Args:
            store: EntryStore instance to sweep
            interval: Seconds between sweeps (default from settings.CLEANUP_INTERVAL)

        Raises:
            ValueError: If interval is not positive
        """
        self.store = store
        self.interval = interval if interval is not None else settings.CLEANUP_INTERVAL
        if self.interval <= 0:
            raise ValueError("interval must be positive")

        self._task: Optional[asyncio.Task] = None
        self._runs = 0
        self._total_removed = 0

    def sweep_once(self) -> int:
        """
        Run a single sweep.

        Returns:
            Number of keys removed
        """
        removed = self.store.cleanup_expired()
        self._runs += 1
        self._total_removed += removed
        if removed:
            logger.debug(f"Sweep #{self._runs} removed {removed} key(s)")
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.sweep_once()
            except Exception as exc:  # Keep sweeping after a failed pass
                logger.exception(f"Expiry sweep failed: {exc}")

    async def start(self) -> None:
        """
        Schedule the sweep loop on the running event loop.

        Calling start() on a running sweeper does nothing.
        """
        if self.is_running():
            return

        self._task = asyncio.create_task(self._run())
        logger.info(f"Expiry sweeper started (interval={self.interval}s)")

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        if self._task is None:
            return

        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Expiry sweeper stopped")

    def is_running(self) -> bool:
        """Check if the sweep loop is currently scheduled."""
        return self._task is not None and not self._task.done()

    def get_stats(self) -> Dict[str, Any]:
        """Get sweeper statistics."""
        return {
            "running": self.is_running(),
            "interval": self.interval,
            "runs": self._runs,
            "total_removed": self._total_removed,
        }
