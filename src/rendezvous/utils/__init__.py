"""Utility functions for rendezvous.

This module provides utility functions including:

- Logging setup and configuration
- Search statistics tracking
"""

from rendezvous.utils.logging import (
    SearchLogger,
    SearchStats,
    configure_logging,
)

__all__ = [
    "SearchLogger",
    "SearchStats",
    "configure_logging",
]
