"""Tests for the Overpass venue search."""

from unittest.mock import MagicMock

import pytest
import requests

from rendezvous.config import VenueSearchConfig
from rendezvous.core.geometry import ring_to_polygon
from rendezvous.domain import BBox
from rendezvous.exceptions import VenueSearchError
from rendezvous.io import OverpassVenueSearch, build_overpass_query, infer_venue_type, tag_for

REGION = ring_to_polygon([(-2.7, 51.3), (-2.3, 51.3), (-2.3, 51.5), (-2.7, 51.5)])

ELEMENTS = [
    {
        "type": "node",
        "id": 101,
        "lat": 51.35,
        "lon": -2.45,
        "tags": {"name": "Chew Valley Lake", "leisure": "park"},
    },
    {
        "type": "node",
        "id": 102,
        "lat": 51.4,
        "lon": -2.5,
        "tags": {"name": "Lakeside Cafe", "amenity": "cafe"},
    },
    {"type": "node", "id": 103, "lat": 51.41, "lon": -2.51, "tags": {"amenity": "cafe"}},
    {"type": "way", "id": 104, "tags": {"name": "No Coordinates", "leisure": "park"}},
]


def make_response(ok: bool = True, status_code: int = 200, payload=None) -> MagicMock:
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.text = "" if ok else "rate limited"
    response.json.return_value = payload if payload is not None else {"elements": ELEMENTS}
    return response


@pytest.fixture
def config() -> VenueSearchConfig:
    """Config with two endpoints."""
    return VenueSearchConfig(endpoints=["https://primary/api", "https://secondary/api"])


class TestQueryBuilding:
    """Tests for Overpass query construction."""

    def test_known_types(self) -> None:
        query = build_overpass_query(BBox(-2.7, 51.3, -2.3, 51.5), ["park", "cafe"])
        assert query.startswith("[out:json][timeout:25];(")
        assert 'node["leisure"="park"]["name"](51.3,-2.7,51.5,-2.3);' in query
        assert 'node["amenity"="cafe"]["name"](51.3,-2.7,51.5,-2.3);' in query
        assert query.endswith(");out body;")

    def test_query_timeout(self) -> None:
        query = build_overpass_query(BBox(0, 0, 1, 1), ["pub"], query_timeout=60)
        assert query.startswith("[out:json][timeout:60];")

    def test_unknown_type_is_amenity(self) -> None:
        assert tag_for("bowling_alley") == ("amenity", "bowling_alley")
        assert tag_for("service_station") == ("amenity", "fuel")

    def test_infer_venue_type(self) -> None:
        assert infer_venue_type({"leisure": "park"}, ["cafe", "park"]) == "park"
        assert infer_venue_type({"shop": "bakery"}, ["cafe", "park"]) == "cafe"
        assert infer_venue_type({}, []) == "unknown"


class TestOverpassVenueSearch:
    """Tests for OverpassVenueSearch.search()."""

    def test_parses_named_nodes(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        session.post.return_value = make_response()

        venues = OverpassVenueSearch(config, session).search(REGION, ["park", "cafe"])

        assert [v.name for v in venues] == ["Chew Valley Lake", "Lakeside Cafe"]
        assert venues[0].venue_type == "park"
        assert venues[1].venue_type == "cafe"
        assert venues[0].osm_id == "node/101"
        assert venues[0].lat == 51.35

    def test_posts_query_to_first_endpoint(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        session.post.return_value = make_response()

        OverpassVenueSearch(config, session).search(REGION, ["park"])

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "https://primary/api"
        assert 'node["leisure"="park"]' in kwargs["data"]["data"]
        assert kwargs["timeout"] == config.timeout_seconds

    def test_no_venue_types(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        assert OverpassVenueSearch(config, session).search(REGION, []) == []
        session.post.assert_not_called()

    def test_falls_back_on_http_error(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        session.post.side_effect = [make_response(ok=False, status_code=429), make_response()]

        venues = OverpassVenueSearch(config, session).search(REGION, ["park"])

        assert len(venues) == 2
        assert session.post.call_count == 2
        assert session.post.call_args_list[1].args[0] == "https://secondary/api"

    def test_falls_back_on_connection_error(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        session.post.side_effect = [requests.ConnectionError("refused"), make_response()]

        venues = OverpassVenueSearch(config, session).search(REGION, ["park"])

        assert len(venues) == 2

    def test_all_endpoints_fail(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        session.post.return_value = make_response(ok=False, status_code=504)

        with pytest.raises(VenueSearchError) as exc_info:
            OverpassVenueSearch(config, session).search(REGION, ["park"])

        assert exc_info.value.status_code == 504
        assert exc_info.value.body == "rate limited"
        assert session.post.call_count == 2

    def test_invalid_json(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        response = make_response()
        response.json.side_effect = ValueError("Expecting value")
        session.post.return_value = response

        with pytest.raises(VenueSearchError):
            OverpassVenueSearch(config, session).search(REGION, ["park"])

    def test_empty_result(self, config: VenueSearchConfig) -> None:
        session = MagicMock()
        session.post.return_value = make_response(payload={"elements": []})

        assert OverpassVenueSearch(config, session).search(REGION, ["park"]) == []
