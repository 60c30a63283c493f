"""Routing engine contracts for rendezvous.

Key classes:
- RoutingEngine: Protocol every routing backend implements
"""

from rendezvous.engines.base import RoutingEngine

__all__ = ["RoutingEngine"]
