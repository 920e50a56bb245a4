"""
NSO RESTCONF operations used by the gateway.

Each function maps one logical controller operation onto a RESTCONF
method and path. Bodies come back as raw JSON text; shaping them is
left to the caller.
"""
import logging
from typing import Optional

from gnso.connectors.nso_connector_rest.request_handler import NSOEndpoint, RestconfClient

logger = logging.getLogger("gnso.connectors.nso.rest.api")

DEVICES_ENDPOINT = "/data/tailf-ncs:devices/device?fields=address;name;device-type;authgroup&depth=2"
DATA_ROOT = "/data"
OPERATIONS_ROOT = "/operations"
QUERY_ENDPOINT = "/tailf/query"


def get_nso_rest_client(endpoint: Optional[NSOEndpoint] = None) -> RestconfClient:
    """
    Factory function to create an NSO RESTCONF client.

    Falls back to the settings in config.config when no endpoint is given.
    """
    return RestconfClient(endpoint or NSOEndpoint.from_config())


class NSORestconfController:
    """Single entry point for all RESTCONF calls the gateway makes to NSO."""

    def __init__(self, client: RestconfClient) -> None:
        self.client = client

    def get_devices(self) -> str:
        """Return the device list with name, address, device-type and authgroup."""
        return self.client.get(DEVICES_ENDPOINT)

    def get_config(self, resource_path: str) -> str:
        """Return the data tree under ``resource_path`` (query string included)."""
        return self.client.get(DATA_ROOT + resource_path)

    def edit_config(self, resource_path: str, payload: str, http_method: str) -> str:
        """
        Change configuration under ``resource_path``.

        Args:
            resource_path: Path below /data, query string included
            payload: JSON text sent as the request body
            http_method: One of PATCH, PUT, POST or DELETE
        """
        send = getattr(self.client, http_method.lower())
        return send(DATA_ROOT + resource_path, payload)

    def query(self, payload: str) -> str:
        """Run a tailf query, e.g. an ``immediate-query`` document."""
        return self.client.post(QUERY_ENDPOINT, payload)

    def exec_operation(self, resource_path: str, payload: str) -> str:
        """Invoke an action such as /devices/fetch-ssh-host-keys."""
        return self.client.post(OPERATIONS_ROOT + resource_path, payload)
