"""
RPC gateway service.

Checks the request token, builds the RESTCONF path and hands the call to
the NSO RESTCONF controller. Only the device listing is reshaped; every
other reply is passed back untouched inside a Response envelope.
"""
import json
import logging
from typing import Any, List, Optional

from gnso.connectors.nso_connector_rest import NSORestconfController, get_nso_rest_client
from gnso.connectors.nso_connector_rest.request_handler import NSOEndpoint
from gnso.gateway.exceptions import InvalidReplyError, PermissionDeniedError, UnsupportedOperationError
from gnso.gateway.models import (
    Device,
    DeviceType,
    EditConfigRequest,
    ExecOperationRequest,
    GetConfigRequest,
    GetDevicesRequest,
    GetDevicesResponse,
    QueryRequest,
    Request,
    Response,
)

logger = logging.getLogger("gnso.gateway.service")

DEVICE_LIST_KEY = "tailf-ncs:device"

# Checked in this order, the first one present wins
DEVICE_KINDS = ("cli", "netconf", "generic")

OPERATION_METHODS = {
    "merge": "PATCH",
    "replace": "PUT",
    "create": "POST",
    "delete": "DELETE",
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def parse_device_type(device_type: Any) -> Optional[DeviceType]:
    """Pick the first of cli, netconf, generic present under ``device-type``."""
    if not isinstance(device_type, dict):
        return None
    for kind in DEVICE_KINDS:
        if kind in device_type:
            variant = device_type[kind]
            ned_id = variant.get("ned-id") if isinstance(variant, dict) else None
            return DeviceType(kind=kind, ned_id=_as_text(ned_id))
    return None


def parse_devices(body: str) -> List[Device]:
    """
    Turn the NSO device list reply into Device records.

    Source order is kept. An empty body or a reply without the device
    list yields an empty list. A single device object counts as a list of one.
    """
    if not body.strip():
        return []
    try:
        data = json.loads(body)
    except ValueError as err:
        logger.error("Device list reply is not valid JSON: %s", err)
        raise InvalidReplyError(f"Invalid device list returned from NSO: {err}") from err

    entries = data.get(DEVICE_LIST_KEY, []) if isinstance(data, dict) else []
    if isinstance(entries, dict):
        entries = [entries]
    elif not isinstance(entries, list):
        entries = []

    devices = []
    for entry in entries:
        if not isinstance(entry, dict):
            entry = {}
        devices.append(Device(
            name=_as_text(entry.get("name")),
            address=_as_text(entry.get("address")),
            authgroup=_as_text(entry.get("authgroup")),
            device_type=parse_device_type(entry.get("device-type")),
        ))
    return devices


def build_path(path: str, options: str) -> str:
    """Append ``options`` as the query string when it is not empty."""
    if options:
        return f"{path}?{options}"
    return path


class NSOService:
    """Implements the gateway RPC operations on top of an NSORestconfController."""

    def __init__(self, controller: NSORestconfController, token: str = "") -> None:
        self.controller = controller
        self._token = token

    def _authorize(self, request: Request) -> None:
        # An empty token disables authorization
        if self._token and request.token != self._token:
            logger.warning("Rejected %s: invalid token", type(request).__name__)
            raise PermissionDeniedError("invalid token")

    def get_devices(self, request: GetDevicesRequest) -> GetDevicesResponse:
        self._authorize(request)
        body = self.controller.get_devices()
        devices = parse_devices(body)
        logger.info("Found %d device(s)", len(devices))
        return GetDevicesResponse(devices=devices)

    def get_config(self, request: GetConfigRequest) -> Response:
        self._authorize(request)
        full_path = build_path(request.path, request.options)
        return Response(result=self.controller.get_config(full_path))

    def edit_config(self, request: EditConfigRequest) -> Response:
        self._authorize(request)
        full_path = build_path(request.path, request.options)
        http_method = OPERATION_METHODS.get(request.operation_type)
        if http_method is None:
            logger.warning("Unsupported operation type: %s", request.operation_type)
            raise UnsupportedOperationError(request.operation_type)
        result = self.controller.edit_config(full_path, request.json_data, http_method)
        return Response(result=result)

    def query(self, request: QueryRequest) -> Response:
        self._authorize(request)
        return Response(result=self.controller.query(request.json_query))

    def exec_operation(self, request: ExecOperationRequest) -> Response:
        self._authorize(request)
        full_path = build_path(request.path, request.options)
        return Response(result=self.controller.exec_operation(full_path, request.json_data))


def build_service(endpoint: Optional[NSOEndpoint] = None, token: Optional[str] = None) -> NSOService:
    """
    Wire an NSOService from explicit settings, falling back to config.config.

    Args:
        endpoint: NSO connection details
        token: Authorization token, empty disables the check

    Returns:
        NSOService ready to serve requests
    """
    if token is None:
        from config.config import TOKEN
        token = TOKEN
    controller = NSORestconfController(get_nso_rest_client(endpoint))
    return NSOService(controller, token=token)
