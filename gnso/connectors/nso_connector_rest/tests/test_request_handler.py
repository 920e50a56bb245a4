"""
Tests for the RESTCONF dispatcher: headers, auth and NSO error detection.

Usage:
    pytest gnso/connectors/nso_connector_rest/tests/test_request_handler.py -v
"""
from unittest.mock import patch

import pytest
import requests
from pydantic import ValidationError

from gnso.conftest import HTTP_REQUEST, make_response
from gnso.connectors.nso_connector_rest import NSOControllerError, NSOEndpoint, NSOHTTPError
from gnso.connectors.nso_connector_rest.request_handler import find_errors


class TestNSOEndpoint:
    def test_trailing_slash_is_stripped(self, endpoint):
        assert endpoint.base_url == "https://nso.example:8888/restconf"

    def test_endpoint_is_immutable(self, endpoint):
        with pytest.raises(ValidationError):
            endpoint.password = "changed"

    def test_from_config(self):
        with patch("config.config.NSO_URL", "http://nso:8080/restconf"), \
                patch("config.config.NSO_USERNAME", "user"), \
                patch("config.config.NSO_PASSWORD", "pass"), \
                patch("config.config.NSO_VERIFY_SSL", True):
            endpoint = NSOEndpoint.from_config()

        assert endpoint.base_url == "http://nso:8080/restconf"
        assert endpoint.username == "user"
        assert endpoint.password == "pass"
        assert endpoint.verify_ssl is True


class TestSendRequest:
    @patch(HTTP_REQUEST)
    def test_headers_and_auth(self, mock_request, client):
        mock_request.return_value = make_response('{"ok": true}')

        client.get("/data/tailf-ncs:devices")

        args, kwargs = mock_request.call_args
        assert args == ("GET", "https://nso.example:8888/restconf/data/tailf-ncs:devices")
        assert kwargs["headers"]["Accept"] == "application/yang-data+json"
        assert kwargs["headers"]["Content-Type"] == "application/yang-data+json"
        assert kwargs["auth"].username == "admin"
        assert kwargs["auth"].password == "secret"
        assert kwargs["verify"] is False

    @patch(HTTP_REQUEST)
    def test_get_sends_no_body(self, mock_request, client):
        mock_request.return_value = make_response("{}")

        client.get("/data/x")

        assert mock_request.call_args[1]["data"] is None

    @patch(HTTP_REQUEST)
    def test_payload_is_sent_verbatim(self, mock_request, client):
        mock_request.return_value = make_response("")
        payload = '{"data":  {"a": 1}}'

        client.patch("/data/x", payload)

        assert mock_request.call_args[1]["data"] == payload.encode("utf-8")

    @patch(HTTP_REQUEST)
    def test_body_is_returned_unmodified(self, mock_request, client):
        body = '{\n  "tailf-ncs:devices": {"device": []}\n}'
        mock_request.return_value = make_response(body)

        assert client.get("/data/tailf-ncs:devices") == body

    @patch(HTTP_REQUEST)
    def test_no_content_reply(self, mock_request, client):
        mock_request.return_value = make_response("", status_code=204, reason="No Content")

        assert client.delete("/data/x") == ""

    @patch(HTTP_REQUEST)
    def test_non_2xx_status_raises_http_error(self, mock_request, client):
        body = '{"ietf-restconf:errors": {"error": [{"error-tag": "invalid-value"}]}}'
        mock_request.return_value = make_response(body, status_code=400, reason="Bad Request")

        with pytest.raises(NSOHTTPError) as exc_info:
            client.get("/data/x")

        assert exc_info.value.status_code == 400
        assert exc_info.value.status == "400 Bad Request"
        assert exc_info.value.body == body
        assert str(exc_info.value) == f"Status 400 Bad Request returned from NSO: {body}"

    @patch(HTTP_REQUEST)
    def test_redirect_status_is_an_error(self, mock_request, client):
        mock_request.return_value = make_response("", status_code=304, reason="Not Modified")

        with pytest.raises(NSOHTTPError):
            client.get("/data/x")

    @patch(HTTP_REQUEST)
    def test_errors_field_in_200_reply(self, mock_request, client):
        mock_request.return_value = make_response('{"errors":{"error":[{"error-message":"bad path"}]}}')

        with pytest.raises(NSOControllerError) as exc_info:
            client.get("/data/x")

        assert "bad path" in str(exc_info.value)
        assert "bad path" in exc_info.value.errors

    @patch(HTTP_REQUEST)
    def test_non_ascii_error_message_is_kept(self, mock_request, client):
        reply = requests.Response()
        reply.status_code = 200
        reply.reason = "OK"
        reply.headers["Content-Type"] = "application/yang-data+json"
        reply._content = '{"errors":{"error":[{"error-message":"chemin inconnu: café"}]}}'.encode("utf-8")
        mock_request.return_value = reply

        with pytest.raises(NSOControllerError) as exc_info:
            client.get("/data/x")

        assert "chemin inconnu: café" in exc_info.value.errors
        assert "café" in str(exc_info.value)

    @patch(HTTP_REQUEST)
    def test_utf8_body_is_decoded(self, mock_request, client):
        body = '{"tailf-ncs:description": "Zürich core"}'
        reply = requests.Response()
        reply.status_code = 200
        reply.headers["Content-Type"] = "application/yang-data+json"
        reply._content = body.encode("utf-8")
        mock_request.return_value = reply

        assert client.get("/data/x") == body

    @patch(HTTP_REQUEST)
    def test_transport_error_is_reraised_unaltered(self, mock_request, client):
        failure = requests.ConnectionError("connection refused")
        mock_request.side_effect = failure

        with pytest.raises(requests.ConnectionError) as exc_info:
            client.get("/data/x")

        assert exc_info.value is failure


class TestFindErrors:
    def test_empty_body(self):
        assert find_errors("") is None

    def test_non_json_body(self):
        assert find_errors("<html>oops</html>") is None

    def test_json_array_body(self):
        assert find_errors('[{"errors": 1}]') is None

    def test_nested_errors_are_ignored(self):
        assert find_errors('{"data": {"errors": "not top level"}}') is None

    def test_string_errors_field(self):
        assert find_errors('{"errors": "bad path"}') == "bad path"

    def test_object_errors_field(self):
        assert find_errors('{"errors": {"error": []}}') == '{"error": []}'

    def test_non_ascii_errors_field(self):
        assert find_errors('{"errors": {"error-message": "ungültiger Pfad"}}') == '{"error-message": "ungültiger Pfad"}'
