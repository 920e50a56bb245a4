"""
Pydantic models for the gateway RPC requests and responses.
"""
from typing import List, Optional, Literal
from pydantic import BaseModel, Field


DeviceKind = Literal["cli", "netconf", "generic"]


class Request(BaseModel):
    """Fields shared by every RPC request."""
    token: str = Field("", description="Authorization token, checked against TOKEN")


class GetDevicesRequest(Request):
    pass


class GetConfigRequest(Request):
    path: str = Field(..., description="Path below /data, e.g. /tailf-ncs:devices/device=ios-1/config")
    options: str = Field("", description="Query string appended after '?', e.g. depth=2")


class EditConfigRequest(Request):
    path: str = Field(..., description="Path below /data")
    options: str = Field("", description="Query string appended after '?'")
    operation_type: str = Field(..., description="One of 'merge', 'replace', 'create' or 'delete'")
    json_data: str = Field("", description="JSON payload sent unchanged to NSO")


class QueryRequest(Request):
    json_query: str = Field(..., description="tailf query document as JSON text")


class ExecOperationRequest(Request):
    path: str = Field(..., description="Path below /operations, e.g. /devices/fetch-ssh-host-keys")
    options: str = Field("", description="Query string appended after '?'")
    json_data: str = Field("", description="JSON input of the operation")


class Response(BaseModel):
    """Generic envelope holding the NSO reply exactly as received."""
    result: str


class DeviceType(BaseModel):
    kind: DeviceKind
    ned_id: str = ""


class Device(BaseModel):
    name: str = ""
    address: str = ""
    authgroup: str = ""
    device_type: Optional[DeviceType] = None


class GetDevicesResponse(BaseModel):
    devices: List[Device] = Field(default_factory=list)
