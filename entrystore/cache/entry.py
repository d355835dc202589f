"""
Stored Entry Types

Every key in the store maps to exactly one of two entry variants:

- ScalarEntry: a single string value
- ListEntry: a double-ended sequence of strings, insertion order significant

Both variants carry an absolute ``expires_at`` instant on the store's
monotonic clock and a ``has_expiry`` marker. The marker decides whether
the instant matters for reads and sweeps; eviction compares the raw
instant (see eviction.py).
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Union


@dataclass
class ScalarEntry:
    """
    A scalar string value.

    Attributes:
        value: The stored string
        expires_at: Absolute monotonic instant, stamped on every set
        has_expiry: True only when the entry was set with a positive TTL
        created_at: Monotonic instant the entry was created
    """
    value: str
    expires_at: float = 0.0
    has_expiry: bool = False
    created_at: float = 0.0


@dataclass
class ListEntry:
    """
    A list of strings.

    List entries are never given a TTL, so ``expires_at`` stays at the
    clock's zero value.
    """
    values: Deque[str] = field(default_factory=deque)
    expires_at: float = 0.0
    has_expiry: bool = False
    created_at: float = 0.0


Entry = Union[ScalarEntry, ListEntry]


def is_live(entry: Entry, now: float) -> bool:
    """Check if an entry is readable at ``now`` (no expiry, or expiry in the future)."""
    return not entry.has_expiry or entry.expires_at > now


def is_expired(entry: Entry, now: float) -> bool:
    """Check if an entry is due for removal by a sweep at ``now``."""
    return entry.has_expiry and entry.expires_at <= now
