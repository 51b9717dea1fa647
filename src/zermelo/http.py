"""Transport-agnostic HTTP client protocol, response type and error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


class ZermeloError(Exception):
    """Base class for every error raised by this library."""


class HttpRequestError(ZermeloError):
    """Raised when a request does not complete with HTTP 200."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationFailed(HttpRequestError):
    """Raised when the token exchange is answered with anything but 200.

    The authorization code is single use, so the caller needs a new code
    from the Zermelo portal before trying again.
    """

    pass


class ResponseError(HttpRequestError):
    """Raised when the appointments endpoint answers with anything but 200.

    A 401 or 403 here usually means the access token was revoked.
    """

    pass


class TransportError(HttpRequestError):
    """Raised when the API cannot be reached (DNS, TLS, connect, timeout).

    There is no HTTP status for these failures, so ``status_code`` is 0.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        """Initialize transport error with optional status code (0 for network errors)."""
        super().__init__(message, status_code)


class MalformedResponse(ZermeloError):
    """Raised when a response body is not JSON or does not match the expected shape."""

    pass


@dataclass
class HttpResponse:
    """Transport-agnostic HTTP response with pre-parsed JSON data.

    ``data`` holds the decoded JSON body, or None when the body was not JSON
    (``is_json`` tells the two apart from a literal ``null``).
    """

    status_code: int
    data: Any = None
    text: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    is_json: bool = True

    def json(self) -> Any:
        """Return pre-parsed JSON data.

        Raises:
            MalformedResponse: If the body could not be decoded as JSON
        """
        if not self.is_json:
            raise MalformedResponse(f"Response body is not valid JSON: {self.text[:200]!r}")
        return self.data

    def raise_for_status(self, error_class: type[HttpRequestError] = ResponseError) -> None:
        """Raise ``error_class`` unless the status is exactly 200.

        The Zermelo API signals success with 200 only, so redirects and
        other 2xx codes are treated as failures as well.
        """
        if self.status_code != 200:
            raise error_class(
                f"HTTP {self.status_code}",
                status_code=self.status_code,
            )


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP transport backends.

    Implementations must parse JSON eagerly in request() and translate
    network failures into TransportError.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> HttpResponse: ...

    def close(self) -> None: ...
