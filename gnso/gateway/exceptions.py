class GatewayError(Exception):
    """
    Base exception for errors detected by the gateway itself.

    ``code`` follows the RPC status code names, ``status_code`` is the
    HTTP status used by the API surface.
    """
    code = "UNKNOWN"
    status_code = 500


class PermissionDeniedError(GatewayError):
    """Raised when the request token does not match the configured one."""
    code = "PERMISSION_DENIED"
    status_code = 403


class UnsupportedOperationError(GatewayError):
    """Raised for an edit operation type the gateway cannot map to HTTP."""
    code = "INVALID_ARGUMENT"
    status_code = 400

    def __init__(self, operation_type: str) -> None:
        self.operation_type = operation_type
        super().__init__(f"Operation type {operation_type} not supported by this server")


class InvalidReplyError(GatewayError):
    """Raised when NSO accepts a call but its reply cannot be decoded."""
    code = "INTERNAL"
    status_code = 502
