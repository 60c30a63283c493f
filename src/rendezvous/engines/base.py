"""Routing engine contract.

Concrete backends (Valhalla, OpenRouteService, GraphHopper, OSRM, ...)
implement this protocol structurally; no base class is required.
"""

from typing import Protocol, runtime_checkable

from rendezvous.domain import Isochrone, LatLon, RouteMatrix, TransportMode


@runtime_checkable
class RoutingEngine(Protocol):
    """Engine-agnostic routing capability.

    Implementations raise RoutingEngineError for HTTP or backend failures,
    carrying the status code and response body.
    """

    name: str

    def compute_isochrone(
        self,
        origin: LatLon,
        mode: TransportMode,
        time_minutes: float,
    ) -> Isochrone:
        """Compute the area reachable from origin within time_minutes."""
        ...

    def compute_route_matrix(
        self,
        origins: list[LatLon],
        destinations: list[LatLon],
        mode: TransportMode,
    ) -> RouteMatrix:
        """Compute travel durations between every origin and destination."""
        ...
