"""
Eviction Policy Module

When a scalar set finds the store at capacity, exactly one existing
entry is removed first. The policies here only choose the victim; the
store performs the removal.

Two policies are available:

- EarliestTimestampEviction ("earliest-timestamp", default):
  the entry whose raw ``expires_at`` is smallest wins, regardless of
  variant or expiry marker. List entries hold the clock's zero value,
  so they are always chosen before any scalar entry.

- ExpiringFirstEviction ("expiring-first"):
  only entries that actually carry an expiry marker compete on
  ``expires_at``. When no entry expires, the oldest ``created_at`` wins.
"""

from typing import Dict, Mapping, Optional, Type

from .entry import Entry


class EvictionPolicy:
    """
    Base class for victim selection.

    Subclasses implement select_victim() and set a registry ``name``.
    """

    name: str = ""

    def select_victim(self, entries: Mapping[str, Entry]) -> Optional[str]:
        """
        Choose the key to evict.

        Args:
            entries: The store's current key -> entry mapping

        Returns:
            The key to remove, or None if the mapping is empty
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EarliestTimestampEviction(EvictionPolicy):
    """
    Evict the entry with the earliest raw ``expires_at``.

    Time Complexity: O(n) per eviction

    Ties go to the first key in mapping iteration order, since min()
    keeps the first minimum it sees.
    """

    name = "earliest-timestamp"

    def select_victim(self, entries: Mapping[str, Entry]) -> Optional[str]:
        if not entries:
            return None
        return min(entries, key=lambda k: entries[k].expires_at)


class ExpiringFirstEviction(EvictionPolicy):
    """
    Evict the soonest-expiring entry, falling back to insertion order.

    Time Complexity: O(n) per eviction
    """

    name = "expiring-first"

    def select_victim(self, entries: Mapping[str, Entry]) -> Optional[str]:
        if not entries:
            return None

        expiring = [k for k, e in entries.items() if e.has_expiry]
        if expiring:
            return min(expiring, key=lambda k: entries[k].expires_at)

        return min(entries, key=lambda k: entries[k].created_at)


_POLICIES: Dict[str, Type[EvictionPolicy]] = {
    EarliestTimestampEviction.name: EarliestTimestampEviction,
    ExpiringFirstEviction.name: ExpiringFirstEviction,
}


def get_eviction_policy(name: str) -> EvictionPolicy:
    """
    Create an eviction policy by its registered name.

    Raises:
        ValueError: If no policy is registered under ``name``
    """
    try:
        return _POLICIES[name.strip().lower()]()
    except KeyError:
        known = ", ".join(sorted(_POLICIES))
        raise ValueError(f"unknown eviction policy {name!r} (expected one of: {known})") from None
