"""
A simple HTTP client for sending authenticated requests to Cisco NSO via RESTCONF.
Every call goes through one dispatcher that attaches basic auth and YANG JSON
headers, and turns NSO failures into exceptions.
"""
import json
import logging
from typing import Optional

import requests
import urllib3
from pydantic import BaseModel, ConfigDict, field_validator
from requests.auth import HTTPBasicAuth

from gnso.connectors.nso_connector_rest.exceptions import NSOControllerError, NSOHTTPError

logger = logging.getLogger("gnso.connectors.nso.rest")

YANG_JSON = "application/yang-data+json"


class NSOEndpoint(BaseModel):
    """
    Connection details for one NSO instance.

    Built once at startup and shared read-only by every request.
    """
    model_config = ConfigDict(frozen=True)

    base_url: str
    username: str
    password: str
    verify_ssl: bool = False

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_config(cls) -> "NSOEndpoint":
        from config.config import NSO_URL, NSO_USERNAME, NSO_PASSWORD, NSO_VERIFY_SSL

        return cls(
            base_url=NSO_URL,
            username=NSO_USERNAME,
            password=NSO_PASSWORD,
            verify_ssl=NSO_VERIFY_SSL,
        )


def find_errors(text: str) -> Optional[str]:
    """Return the top-level ``errors`` field of a JSON reply as text, if any."""
    if not text.strip():
        return None
    try:
        data = json.loads(text)
    except ValueError:
        logger.debug("Response body is not JSON.")
        return None
    if not isinstance(data, dict) or "errors" not in data:
        return None
    errors = data["errors"]
    return errors if isinstance(errors, str) else json.dumps(errors, ensure_ascii=False)


class RestconfClient:
    """
    HTTP client for the NSO RESTCONF API.

    Usage:
        client = RestconfClient(NSOEndpoint(
            base_url="http://localhost:8080/restconf",
            username="admin",
            password="admin",
        ))
        body = client.get("/data/tailf-ncs:devices/device")

    No session is kept between calls, each request is an independent exchange.
    """

    def __init__(self, endpoint: NSOEndpoint) -> None:
        self.endpoint = endpoint
        self._auth = HTTPBasicAuth(endpoint.username, endpoint.password)
        self._headers = {
            "Content-Type": YANG_JSON,
            "Accept": YANG_JSON,
        }
        if not endpoint.verify_ssl:
            # Lab NSO instances usually run with self-signed certs
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _send_request(self, method: str, path: str, payload: Optional[str] = None) -> str:
        """
        Send an HTTP request to NSO and return the raw response body.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: RESTCONF path appended to the base URL, query string included
            payload: JSON text sent unchanged as the request body

        Raises:
            requests.RequestException: NSO could not be reached
            NSOHTTPError: NSO answered with a non 2xx status
            NSOControllerError: NSO answered 2xx but reported errors in the body
        """
        url = f"{self.endpoint.base_url}{path}"
        logger.info("NSO RESTCONF %s: %s", method.upper(), url)

        data = None
        if payload is not None:
            logger.debug("Request body: %s", payload)
            data = payload.encode("utf-8")

        try:
            response = requests.request(
                method.upper(),
                url,
                data=data,
                auth=self._auth,
                headers=self._headers,
                verify=self.endpoint.verify_ssl,
            )
        except requests.RequestException as err:
            logger.error("NSO RESTCONF transport error: %s", err)
            raise

        # RESTCONF JSON is UTF-8; requests only assumes that for application/json
        if not response.encoding:
            response.encoding = "utf-8"
        text = response.text
        logger.debug("Response status: %s", response.status_code)

        if response.status_code < 200 or response.status_code > 299:
            status = f"{response.status_code} {response.reason}".strip()
            logger.error("NSO RESTCONF error (%s): %s", status, text)
            raise NSOHTTPError(response.status_code, status, text)

        errors = find_errors(text)
        if errors is not None:
            logger.error("NSO reported errors: %s", errors)
            raise NSOControllerError(errors)

        return text

    def get(self, path: str) -> str:
        """Send GET request."""
        return self._send_request("GET", path)

    def post(self, path: str, payload: Optional[str] = None) -> str:
        """Send POST request."""
        return self._send_request("POST", path, payload)

    def put(self, path: str, payload: Optional[str] = None) -> str:
        """Send PUT request."""
        return self._send_request("PUT", path, payload)

    def patch(self, path: str, payload: Optional[str] = None) -> str:
        """Send PATCH request."""
        return self._send_request("PATCH", path, payload)

    def delete(self, path: str, payload: Optional[str] = None) -> str:
        """Send DELETE request."""
        return self._send_request("DELETE", path, payload)

