"""
NSO REST API functions subpackage.
"""
from gnso.connectors.nso_connector_rest.api.nso_restconf import (
    get_nso_rest_client,
    NSORestconfController,
)

__all__ = [
    "get_nso_rest_client",
    "NSORestconfController",
]
