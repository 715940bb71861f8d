"""
Tests for the Ohana API client.
"""

from unittest.mock import MagicMock

import pytest
import requests

from app.clients.exceptions import (
    BadRequest,
    ClientError,
    ConnectionFailed,
    Forbidden,
    NotFound,
    OhanaError,
    ServerError,
    Unauthorized,
    UnprocessableEntity,
)
from app.clients.ohana import MEDIA_TYPE, OhanaClient
from app.services.search import SearchService
from schemas.location import Location, SearchParams

ENDPOINT = "https://ohana.example/api"


def make_response(status_code=200, body=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = "Reason"
    resp.text = text
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def session():
    s = requests.Session()
    s.get = MagicMock(return_value=make_response(body=[]))
    return s


@pytest.fixture
def client(session):
    return OhanaClient(ENDPOINT + "/", api_token="secret", timeout=5, session=session)


# =============================================================================
# Requests
# =============================================================================


class TestRequests:
    def test_headers(self, client, session):
        assert session.headers["Accept"] == MEDIA_TYPE
        assert session.headers["X-Api-Token"] == "secret"
        assert session.headers["User-Agent"] == "Ohana Web Search"

    def test_no_token_header_without_token(self):
        s = requests.Session()
        OhanaClient(ENDPOINT, session=s)
        assert "X-Api-Token" not in s.headers

    def test_search_sends_params(self, client, session, location_data):
        session.get.return_value = make_response(body=[location_data])

        result = client.search("search", SearchParams(keyword="food", language="Spanish"))

        session.get.assert_called_once_with(
            f"{ENDPOINT}/search",
            params={"keyword": "food", "language": "Spanish"},
            timeout=5,
        )
        assert result == [Location(**location_data)]
        assert result[0].address.city == "Belmont"
        assert result[0].updated_at == location_data["updated_at"]

    def test_search_accepts_plain_dict(self, client, session):
        client.search("search", {"keyword": "asdfasg", "location": None})

        assert session.get.call_args.kwargs["params"] == {"keyword": "asdfasg"}

    def test_locations_without_params(self, client, session):
        client.locations()

        session.get.assert_called_once_with(f"{ENDPOINT}/locations", params=None, timeout=5)

    def test_location_by_id(self, client, session, location_data):
        session.get.return_value = make_response(body=location_data)

        result = client.location("san-mateo-county-human-services-agency")

        assert session.get.call_args.args[0] == (
            f"{ENDPOINT}/locations/san-mateo-county-human-services-agency"
        )
        assert result.name == location_data["name"]


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    @pytest.mark.parametrize(
        "status_code,error_cls",
        [
            (400, BadRequest),
            (401, Unauthorized),
            (403, Forbidden),
            (404, NotFound),
            (422, UnprocessableEntity),
            (409, ClientError),
            (500, ServerError),
            (503, ServerError),
        ],
    )
    def test_status_mapping(self, client, session, status_code, error_cls):
        session.get.return_value = make_response(status_code, {"message": "nope"})

        with pytest.raises(error_cls) as exc_info:
            client.search("search", {"keyword": "food"})

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "nope"

    def test_error_message_includes_request(self, client, session):
        session.get.return_value = make_response(
            400, {"status": 400, "message": "Either keyword, location, or language is missing."}
        )

        with pytest.raises(BadRequest) as exc_info:
            client.search("search")

        err = exc_info.value
        assert str(err).startswith(f"GET {ENDPOINT}/search: 400 -")
        assert err.missing_parameters

    def test_errors_list(self, client, session):
        session.get.return_value = make_response(422, {"error": "invalid", "errors": ["radius is invalid"]})

        with pytest.raises(UnprocessableEntity) as exc_info:
            client.search("search")

        assert exc_info.value.errors == ["radius is invalid"]
        assert "radius is invalid" in str(exc_info.value)

    def test_non_json_error_body(self, client, session):
        session.get.return_value = make_response(502, ValueError("no json"), text="Bad Gateway")

        with pytest.raises(ServerError) as exc_info:
            client.location(1)

        assert exc_info.value.message == "Bad Gateway"

    def test_invalid_json_success_body(self, client, session):
        session.get.return_value = make_response(200, ValueError("no json"))

        with pytest.raises(OhanaError):
            client.locations()

    def test_connection_error(self, client, session):
        session.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ConnectionFailed) as exc_info:
            client.search("search", {"keyword": "food"})

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_timeout(self, client, session):
        session.get.side_effect = requests.Timeout("slow")

        with pytest.raises(ConnectionFailed):
            client.location(1)


# =============================================================================
# Error bodies through the search gateway
# =============================================================================


class TestSearchFallbacks:
    def test_error_and_description_are_joined(self, client, session):
        session.get.return_value = make_response(
            400, {"error": "bad request", "description": "Either keyword, location, or language is missing."}
        )

        with pytest.raises(BadRequest) as exc_info:
            client.search("search")

        assert exc_info.value.message == (
            "bad request: Either keyword, location, or language is missing."
        )
        assert exc_info.value.missing_parameters

    def test_missing_description_lists_all_locations(self, client, session, location_data):
        session.get.side_effect = [
            make_response(
                400, {"error": "bad request", "description": "Either keyword, location, or language is missing."}
            ),
            make_response(body=[location_data]),
        ]

        result = SearchService(client=client).search(SearchParams())

        assert result == [Location(**location_data)]
        assert session.get.call_args.args[0] == f"{ENDPOINT}/locations"

    def test_invalid_radius_description_searches_no_match(self, client, session):
        session.get.side_effect = [
            make_response(400, {"error": "bad request", "description": "Radius must be a Float between 0.1 and 50."}),
            make_response(body=[]),
        ]

        result = SearchService(client=client).search(SearchParams(location="Belmont, CA", radius="far"))

        assert result == []
        assert session.get.call_args.args[0] == f"{ENDPOINT}/search"
        assert session.get.call_args.kwargs["params"] == {"keyword": "asdfasg"}
