"""
Entry Store: Embeddable In-Memory Key-Value Store

An in-process cache primitive holding scalar strings and double-ended
lists of strings, with per-key TTL expiry and a bounded key count.
"""

from .cache.store import EntryStore

__version__ = "1.0.0"

__all__ = ["EntryStore"]
