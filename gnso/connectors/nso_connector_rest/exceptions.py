class NSORestconfError(Exception):
    """Base exception for NSO RESTCONF operations."""
    pass


class NSOHTTPError(NSORestconfError):
    """Raised when NSO answers with a status outside 2xx."""

    def __init__(self, status_code: int, status: str, body: str) -> None:
        self.status_code = status_code
        self.status = status
        self.body = body
        super().__init__(f"Status {status} returned from NSO: {body}")


class NSOControllerError(NSORestconfError):
    """Raised when a 2xx NSO reply carries a top-level ``errors`` field."""

    def __init__(self, errors: str) -> None:
        self.errors = errors
        super().__init__(f"Error returned from NSO: {errors}")
