"""
NSO REST Connector package.

Provides the RESTCONF client and the controller operations built on it.
"""
from gnso.connectors.nso_connector_rest.request_handler import (
    RestconfClient,
    NSOEndpoint,
)
from gnso.connectors.nso_connector_rest.exceptions import (
    NSORestconfError,
    NSOHTTPError,
    NSOControllerError,
)
from gnso.connectors.nso_connector_rest.api.nso_restconf import (
    get_nso_rest_client,
    NSORestconfController,
)

__all__ = [
    # HTTP Client
    "RestconfClient",
    "NSOEndpoint",
    # Errors
    "NSORestconfError",
    "NSOHTTPError",
    "NSOControllerError",
    # Controller
    "get_nso_rest_client",
    "NSORestconfController",
]
