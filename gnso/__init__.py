"""gnso: RPC gateway in front of the Cisco NSO RESTCONF API."""
