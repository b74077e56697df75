class FirebucketError(Exception):
    """Base class for every error raised by a default bucket operation."""


class AuthError(FirebucketError):
    """Raised when no usable Google credentials can be resolved."""


class SerializationError(FirebucketError):
    """Raised when a request body cannot be encoded as JSON."""


class TransportError(FirebucketError):
    """Raised when the HTTP request itself fails (DNS, TLS, timeout, ...)."""


class ProbeError(FirebucketError):
    """
    Raised when the default bucket existence check gets an unexpected
    status code or an undecodable 200 response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
