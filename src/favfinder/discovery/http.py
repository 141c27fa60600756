# ABOUTME: HTTP client abstraction for retrieving pages, manifests and icons.
# ABOUTME: Provides an injectable fetch capability with an httpx-backed default.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

USER_AGENT = "favfinder/0.1.0"
DEFAULT_TIMEOUT = 30.0


class IconFetchError(Exception):
    """Raised when a URL cannot be retrieved or answers with status >= 300."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{message}: {url}")
        self.url = url
        self.status_code = status_code


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for the GET operation favicon discovery needs.

    Implementations signal a failed retrieval by raising IconFetchError.
    The manifest and well-known sources also absorb any other exception,
    but a failure on the page itself propagates to the caller unchanged.
    """

    def get(self, url: str) -> bytes: ...


class FaviconHttpClient:
    """HTTP client for favicon discovery, wrapping httpx.Client.

    Follows redirects, sends the favfinder User-Agent and treats any final
    status above 299 as a failure. There is no retry: discovery is
    best-effort and a failed source is simply skipped by the caller.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        proxy: str | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._log = logger or logging.getLogger(__name__)
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT, **(headers or {})},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if proxy is not None:
            client_kwargs["proxy"] = proxy
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(self, url: str) -> bytes:
        """Retrieve url and return the response body.

        Raises:
            IconFetchError: On transport errors, a URL httpx cannot request,
                or a status code above 299.
        """
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise IconFetchError(url, f"request failed ({exc})") from exc

        self._log.debug("[%d] %s", response.status_code, url)
        if response.status_code > 299:
            raise IconFetchError(url, f"HTTP {response.status_code}", response.status_code)
        return response.content

    def close(self) -> None:
        self._client.close()
