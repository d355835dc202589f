"""
Entry Store Configuration Settings

This module contains the configuration constants for the entry store
and its expiry sweeper. Values can be overridden through environment
variables read at import time.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Store configuration settings."""

    # Capacity settings
    MAX_KEYS: int = int(os.environ.get("ENTRY_STORE_MAX_KEYS", "1000"))

    # Eviction settings ("earliest-timestamp" or "expiring-first")
    EVICTION_POLICY: str = os.environ.get("ENTRY_STORE_EVICTION_POLICY", "earliest-timestamp")

    # TTL settings
    CLEANUP_INTERVAL: float = float(os.environ.get("ENTRY_STORE_CLEANUP_INTERVAL", "60"))  # Seconds between sweeps

    # Logging settings
    DEBUG: bool = os.environ.get("ENTRY_STORE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("ENTRY_STORE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
