"""Shared fixtures for the gnso tests."""
from unittest.mock import MagicMock

import pytest

from gnso.connectors.nso_connector_rest import NSOEndpoint, NSORestconfController, RestconfClient

HTTP_REQUEST = "gnso.connectors.nso_connector_rest.request_handler.requests.request"


def make_response(text: str = "", status_code: int = 200, reason: str = "OK") -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    return response


@pytest.fixture
def endpoint() -> NSOEndpoint:
    return NSOEndpoint(base_url="https://nso.example:8888/restconf/", username="admin", password="secret")


@pytest.fixture
def client(endpoint: NSOEndpoint) -> RestconfClient:
    return RestconfClient(endpoint)


@pytest.fixture
def controller(client: RestconfClient) -> NSORestconfController:
    return NSORestconfController(client)
