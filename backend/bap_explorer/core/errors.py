"""BAP Explorer — Error taxonomy shared by the API and the client."""


class ExplorerError(Exception):
    """Base class for every error raised by the explorer."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidParameter(ExplorerError):
    """Malformed page/limit/filter/identifier. Caller fixes the input."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFound(ExplorerError):
    """Well-formed identifier that resolves to nothing."""


class FetchError(ExplorerError):
    """Client-side failure while talking to the explorer API."""


class TransportFailure(FetchError):
    """Network unreachable, connection reset, timeout."""


class UpstreamFailure(FetchError):
    """Non-success HTTP status from the API."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class DecodeFailure(FetchError):
    """Response body is not JSON or not in the expected shape."""
