"""
Shishutsukan Error Taxonomy

Every failure the client can produce is one of six exceptions, all
subclasses of ShishutsukanError. Callers that only care whether a call
worked catch the base class; callers that care why catch the variant.

None of these is retried, logged, or swallowed by the client.
"""

from typing import Any


class ShishutsukanError(Exception):
    """Base exception for shishutsukan client errors."""
    pass


class InvalidURLError(ShishutsukanError):
    """The base URL string is not an absolute http(s) URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__("Invalid URL")


class InvalidResponseError(ShishutsukanError):
    """The transport returned something that is not an HTTP response."""

    def __init__(self, response: Any = None):
        self.response = response
        super().__init__("Invalid response")


class HTTPError(ShishutsukanError):
    """
    The server answered with a status outside 200-299.

    The body is never decoded in this case.
    """

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error: {status_code}")


class DecodingError(ShishutsukanError):
    """The response body did not match the expected JSON shape."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Decoding error: {cause}")


class NetworkError(ShishutsukanError):
    """The transport failed (connection refused, DNS, timeout)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class ServerError(ShishutsukanError):
    """
    The server accepted the request (2xx) but reported a failure
    in the envelope's ``error`` field.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Server error: {message}")
