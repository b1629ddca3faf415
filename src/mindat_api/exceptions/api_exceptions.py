# api_exceptions.py
from enum import Enum
from typing import ClassVar, Optional
import requests


class ErrorKind(str, Enum):
    """The closed set of failure categories produced by a single request/response cycle."""

    TRANSPORT = "transport"
    INVALID_URL = "invalid_url"
    API = "api"
    DECODE = "decode"
    AUTHENTICATION_REQUIRED = "authentication_required"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    INVALID_PARAMETER = "invalid_parameter"


class MindatAPIException(Exception):
    """Base exception for errors raised while talking to the Mindat API."""

    kind: ClassVar[ErrorKind] = ErrorKind.API
    status_code: Optional[int] = None


class RequestFailedException(MindatAPIException):
    """Exception raised when the request never produced a response (network, DNS, TLS, timeout)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, error: requests.RequestException):
        self.error = error
        super().__init__(f"HTTP request failed: {error}")

    @property
    def is_timeout(self) -> bool:
        return isinstance(self.error, requests.Timeout)

    @property
    def is_connect(self) -> bool:
        return isinstance(self.error, requests.ConnectionError)

    @property
    def url(self) -> Optional[str]:
        request = getattr(self.error, "request", None)
        return getattr(request, "url", None)


class InvalidURLException(MindatAPIException):
    """Exception raised when the base URL or the joined request URL cannot be parsed."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, message: str):
        super().__init__(f"Invalid URL: {message}")


class UpstreamAPIException(MindatAPIException):
    """Exception raised for non-2xx responses that have no dedicated category."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error (status {status_code}): {message}")


class ResponseDecodeException(MindatAPIException):
    """Exception raised when a successful response body cannot be decoded into the expected shape."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(f"Failed to parse response: {message}")


class AuthenticationRequiredException(MindatAPIException):
    """Exception raised on 401 responses."""

    kind = ErrorKind.AUTHENTICATION_REQUIRED
    status_code = 401

    def __init__(self):
        super().__init__("Authentication required: please provide a valid API token")


class RateLimitExceededException(MindatAPIException):
    """Exception raised on 429 responses."""

    kind = ErrorKind.RATE_LIMITED
    status_code = 429

    def __init__(self):
        super().__init__("Rate limit exceeded, please wait before making more requests")


class NotFoundException(MindatAPIException):
    """Exception raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND
    status_code = 404

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Resource not found: {detail}")


class InvalidParameterException(MindatAPIException):
    """Exception raised when a request value cannot be sent, such as a token that is not a valid header value."""

    kind = ErrorKind.INVALID_PARAMETER

    def __init__(self, message: str):
        super().__init__(f"Invalid parameter: {message}")


class APIParameterException(ValueError):
    """Exception raised for invalid query or client configuration values at build time."""
    pass
