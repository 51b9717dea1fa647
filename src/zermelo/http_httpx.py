"""httpx-based implementation of the HttpClient protocol."""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from .const import DEFAULT_TIMEOUT, USER_AGENT
from .http import HttpResponse, MalformedResponse, TransportError

_LOGGER = logging.getLogger(__name__)

_ACCESS_TOKEN_RE = re.compile(r"(access_token=)[^&\s\"']+")


class AccessTokenFilter(logging.Filter):
    """Mask ``access_token`` query values in log records.

    httpx logs every request URL at INFO, and the appointments URL carries
    the access token.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _ACCESS_TOKEN_RE.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def _install_access_token_filter() -> None:
    httpx_logger = logging.getLogger("httpx")
    if not any(isinstance(f, AccessTokenFilter) for f in httpx_logger.filters):
        httpx_logger.addFilter(AccessTokenFilter())


class HttpxHttpClient:
    """HttpClient implementation backed by httpx.Client.

    Args:
        timeout: Timeout in seconds applied to connect, read, write and pool
            acquisition of a new internal client.
        httpx_client: Optional pre-configured ``httpx.Client``.  When
            provided, the caller retains ownership and must close it.
            The *timeout* parameter is ignored when *httpx_client* is given.
    """

    def __init__(
        self,
        timeout: float | None = DEFAULT_TIMEOUT,
        httpx_client: httpx.Client | None = None,
    ) -> None:
        _install_access_token_filter()
        self._owns_client = httpx_client is None
        self._client = httpx_client or httpx.Client(
            headers={"User-Agent": USER_AGENT},
            timeout=httpx.Timeout(timeout),
        )

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> HttpResponse:
        try:
            response = self._client.request(
                method,
                url,
                headers=headers,
                params=params,
                data=data,
            )
        except httpx.DecodingError as exc:
            # Body could not be decompressed or decoded
            _LOGGER.debug("%s %s returned an undecodable body: %s", method.upper(), url, exc)
            raise MalformedResponse(f"{type(exc).__name__}: {exc}") from exc
        except httpx.RequestError as exc:
            _LOGGER.debug("%s %s failed: %s", method.upper(), url, exc)
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        is_json = True
        try:
            payload = response.json()
        except (ValueError, UnicodeDecodeError):
            payload = None
            is_json = False
        return HttpResponse(
            status_code=response.status_code,
            data=payload,
            text=response.text,
            headers=dict(response.headers),
            is_json=is_json,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
