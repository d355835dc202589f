"""Cache module for Entry Store."""

from .entry import ListEntry, ScalarEntry
from .eviction import (
    EarliestTimestampEviction,
    EvictionPolicy,
    ExpiringFirstEviction,
    get_eviction_policy,
)
from .store import EntryStore
from .sweeper import ExpirySweeper

__all__ = [
    "EntryStore",
    "ExpirySweeper",
    "ScalarEntry",
    "ListEntry",
    "EvictionPolicy",
    "EarliestTimestampEviction",
    "ExpiringFirstEviction",
    "get_eviction_policy",
]
