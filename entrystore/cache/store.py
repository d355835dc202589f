"""
Entry Store Module

This module implements the core in-process key-value store.

Keys map to either a scalar string or a list of strings. Scalars may
carry a TTL; lists never do. The store holds at most ``max_size`` keys,
enforced when a scalar is set, by evicting one entry chosen by the
configured eviction policy.

All operations are total: absent keys, type mismatches and out-of-range
indices return an empty sentinel ("" / [] / 0) instead of raising.
"""

import logging
import threading
import time
from collections import deque
from itertools import islice
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..config.settings import settings
from .entry import Entry, ListEntry, ScalarEntry, is_expired, is_live
from .eviction import EvictionPolicy, get_eviction_policy

logger = logging.getLogger(__name__)


class EntryStore:
    """
    In-memory key-value store with scalar and list values, TTL expiry
    and bounded key count.

    Expiry:
        Scalars set with ttl > 0 read as "" once their instant has
        passed, but stay in the store (and count towards size()) until
        cleanup_expired() sweeps them.

    Eviction:
        Only set() checks capacity. lpush()/rpush() creating a new list
        key do not, so the key count can exceed max_size through lists.

    Thread safety:
        Each instance owns one re-entrant lock held for the duration of
        every public operation.

    Attributes:
        max_size: Maximum number of keys enforced by set()
        eviction_policy: The EvictionPolicy choosing victims
    """

    def __init__(
            self,
            max_size: int = None,
            eviction_policy: Union[EvictionPolicy, str, None] = None,
            time_fn: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the store.

        Args:
            max_size: Maximum number of keys (default from settings.MAX_KEYS)
            eviction_policy: Policy instance or registered name
                (default from settings.EVICTION_POLICY)
            time_fn: Monotonic clock returning seconds as a float

        Raises:
            ValueError: If max_size is not positive or the policy name is unknown
        """
        self.max_size = max_size if max_size is not None else settings.MAX_KEYS
        if self.max_size < 1:
            raise ValueError("max_size must be positive")

        if eviction_policy is None:
            eviction_policy = settings.EVICTION_POLICY
        if isinstance(eviction_policy, str):
            eviction_policy = get_eviction_policy(eviction_policy)
        self.eviction_policy = eviction_policy

        self._time_fn = time_fn
        self._entries: Dict[str, Entry] = {}
        self._lock = threading.RLock()
        self._evictions = 0

    # ------------------------------------------------------------------
    # Scalar operations
    # ------------------------------------------------------------------

    def set(self, key: str, value: str, ttl_seconds: int = 0) -> None:
        """
        Create or overwrite ``key`` as a scalar.

        Args:
            key: The key to store
            value: The string value
            ttl_seconds: Time-to-live in seconds (<= 0 means no expiration)

        The capacity check runs first and may evict one entry, which can
        be ``key`` itself when it is already present.
        """
        with self._lock:
            self._evict_if_needed()
            now = self._time_fn()
            self._entries[key] = ScalarEntry(
                value=value,
                expires_at=now + ttl_seconds,
                has_expiry=ttl_seconds > 0,
                created_at=now,
            )

    def get(self, key: str) -> str:
        """
        Retrieve a scalar value.

        Returns:
            The value if ``key`` is a live scalar, "" otherwise.
            Expired entries are not removed here.
        """
        with self._lock:
            entry = self._entries.get(key)
            if isinstance(entry, ScalarEntry) and is_live(entry, self._time_fn()):
                return entry.value
            return ""

    def delete(self, key: str) -> bool:
        """
        Remove ``key`` whatever its type.

        Returns:
            True if the key was present, False otherwise
        """
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove all keys from the store."""
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        """
        Get the current number of keys in the store.

        Note: This includes expired keys that haven't been swept yet.
        """
        with self._lock:
            return len(self._entries)

    def mset(self, pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> None:
        """
        Set several scalars in order, each without TTL.

        Every pair goes through set(), so each one runs its own
        capacity check.
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        with self._lock:
            for key, value in pairs:
                self.set(key, value)

    def mget(self, keys: Iterable[str]) -> List[str]:
        """Get several scalars; results line up with ``keys`` position by position."""
        with self._lock:
            return [self.get(key) for key in keys]

    def keys(self) -> List[str]:
        """
        Get all current keys, including expired ones not yet swept.

        Order is unspecified.
        """
        with self._lock:
            return list(self._entries)

    def cleanup_expired(self) -> int:
        """
        Remove every entry whose expiry instant is at or before now.

        Entries without an expiry marker are never removed. Calling it
        again right away removes nothing new.

        Returns:
            Number of keys removed
        """
        with self._lock:
            now = self._time_fn()
            to_delete = [k for k, e in self._entries.items() if is_expired(e, now)]
            for key in to_delete:
                del self._entries[key]

        if to_delete:
            logger.debug(f"Swept {len(to_delete)} expired key(s)")
        return len(to_delete)

    # ------------------------------------------------------------------
    # List operations
    # ------------------------------------------------------------------

    def lpush(self, key: str, value: str) -> None:
        """Prepend ``value``; a missing or scalar key becomes a new one-element list."""
        with self._lock:
            entry = self._entries.get(key)
            if isinstance(entry, ListEntry):
                entry.values.appendleft(value)
            else:
                self._entries[key] = self._new_list(value)

    def rpush(self, key: str, value: str) -> None:
        """Append ``value``; a missing or scalar key becomes a new one-element list."""
        with self._lock:
            entry = self._entries.get(key)
            if isinstance(entry, ListEntry):
                entry.values.append(value)
            else:
                self._entries[key] = self._new_list(value)

    def lpop(self, key: str) -> str:
        """
        Remove and return the first element of a list.

        The key is deleted when its last element is popped.

        Returns:
            The element, or "" if ``key`` is absent or not a list
        """
        with self._lock:
            entry = self._list_entry(key)
            if entry is None:
                return ""
            value = entry.values.popleft()
            if not entry.values:
                del self._entries[key]
            return value

    def rpop(self, key: str) -> str:
        """Remove and return the last element of a list (see lpop())."""
        with self._lock:
            entry = self._list_entry(key)
            if entry is None:
                return ""
            value = entry.values.pop()
            if not entry.values:
                del self._entries[key]
            return value

    def lrange(self, key: str, start: int, stop: int) -> List[str]:
        """
        Get the inclusive slice [start, stop] of a list.

        Negative indices count from the end. After that both bounds are
        clamped into [0, len - 1] independently, so ``lrange(k, 2, 10)``
        on a five-element list yields its last three elements.

        Returns:
            The elements, or [] if ``key`` is absent, not a list, or
            start > stop
        """
        with self._lock:
            entry = self._list_entry(key)
            if entry is None:
                return []

            values = entry.values
            size = len(values)

            if start < 0:
                start += size
            if stop < 0:
                stop += size

            start = max(0, min(start, size - 1))
            stop = max(0, min(stop, size - 1))

            if start > stop:
                return []
            return list(islice(values, start, stop + 1))

    def llen(self, key: str) -> int:
        """Get the length of a list, 0 if ``key`` is absent or not a list."""
        with self._lock:
            entry = self._entries.get(key)
            if isinstance(entry, ListEntry):
                return len(entry.values)
            return 0

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - total_keys: Total keys in store
            - expired_keys: Count of expired (but not yet swept) keys
            - active_keys: Count of non-expired keys
            - scalar_keys / list_keys: Count per entry type
            - max_size: Maximum capacity
            - utilization: Current usage as fraction of max_size
            - evictions: Entries evicted since creation
            - eviction_policy: Registered name of the policy
        """
        with self._lock:
            now = self._time_fn()
            total = len(self._entries)
            expired = sum(1 for e in self._entries.values() if is_expired(e, now))
            lists = sum(1 for e in self._entries.values() if isinstance(e, ListEntry))

            return {
                "total_keys": total,
                "expired_keys": expired,
                "active_keys": total - expired,
                "scalar_keys": total - lists,
                "list_keys": lists,
                "max_size": self.max_size,
                "utilization": total / self.max_size,
                "evictions": self._evictions,
                "eviction_policy": self.eviction_policy.name,
            }

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_list(self, value: str) -> ListEntry:
        return ListEntry(values=deque([value]), created_at=self._time_fn())

    def _list_entry(self, key: str) -> Optional[ListEntry]:
        """Return the non-empty list stored at ``key``, or None."""
        entry = self._entries.get(key)
        if isinstance(entry, ListEntry) and entry.values:
            return entry
        return None

    def _evict_if_needed(self) -> None:
        if len(self._entries) < self.max_size:
            return

        victim = self.eviction_policy.select_victim(self._entries)
        if victim is None:
            return

        del self._entries[victim]
        self._evictions += 1
        logger.debug(f"Evicted key {victim!r} ({self.eviction_policy.name})")
