"""Exception hierarchy for rendezvous."""


class RendezvousError(Exception):
    """Base exception for all rendezvous errors."""

    pass


class GeometryError(RendezvousError):
    """Errors in geometric calculations."""

    pass


class InvalidGeometryInputError(GeometryError, ValueError):
    """A scalar geometry input (coordinate, distance, bearing, radius) is invalid."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} {value!r}: {reason}")


class GeoJSONError(GeometryError):
    """Malformed or unsupported GeoJSON geometry."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid GeoJSON polygon: {reason}")


class RendezvousInputError(RendezvousError, ValueError):
    """Rendezvous request options are not usable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UpstreamError(RendezvousError):
    """Errors reported by an external routing or venue service."""

    pass


class RoutingEngineError(UpstreamError):
    """A routing engine request failed."""

    def __init__(
        self,
        engine: str,
        reason: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.engine = engine
        self.reason = reason
        self.status_code = status_code
        self.body = body
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"{engine} request failed{status}: {reason}")


class VenueSearchError(UpstreamError):
    """Every venue search endpoint failed."""

    def __init__(
        self,
        reason: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.reason = reason
        self.status_code = status_code
        self.body = body
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Venue search failed{status}: {reason}")
