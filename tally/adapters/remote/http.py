"""HTTP remote data adapter.

Implements RemoteDataPort by issuing GET requests with httpx and
returning the response body as text. Transport and status failures
are translated into the core FetchError.
"""

import logging
from typing import Any

import httpx

from tally.core.ports import FetchError, RemoteDataPort

logger = logging.getLogger(__name__)


class HTTPRemoteDataAdapter(RemoteDataPort):
    """httpx-backed remote data adapter."""

    def __init__(
        self,
        url: str,
        api_key: str = "",
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize HTTP adapter.

        Args:
            url: URL to fetch (e.g., http://localhost:8000/data). Paths passed
                to fetch_data() are resolved relative to it.
            api_key: Optional API key, sent as a bearer token.
            timeout_seconds: Request timeout in seconds. Only applies to the
                client the adapter creates; an injected client keeps its own
                timeout.
            client: Optional pre-configured client. When given, the caller
                owns it and close() leaves it open.

        Raises:
            ValueError: If url is empty or not a parseable http(s) URL, or
                timeout_seconds is not positive.
        """
        if not url or not url.strip():
            raise ValueError("url must be a non-empty string")
        if timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {timeout_seconds}"
            )

        try:
            parsed = httpx.URL(url.strip())
        except httpx.InvalidURL as e:
            raise ValueError(f"url is not a valid URL: {e}") from e
        if parsed.scheme not in {"http", "https"} or not parsed.host:
            raise ValueError(f"url must be an absolute http(s) URL, got {url!r}")

        self.url = url.strip().rstrip("/")
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            follow_redirects=True,
        )

    def _get_headers(self) -> dict[str, str]:
        """Build request headers."""
        headers = {"Accept": "text/plain, application/json, */*"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _build_url(self, path: str) -> str:
        """Resolve a relative path against the configured URL.

        Raises:
            FetchError: If the path has '.' or '..' segments, which would
                resolve outside the configured URL.
        """
        path = path.strip("/")
        if not path:
            return self.url
        if any(segment in {".", ".."} for segment in path.split("/")):
            raise FetchError(f"Path {path!r} escapes the configured URL")
        return f"{self.url}/{path}"

    async def __aenter__(self) -> "HTTPRemoteDataAdapter":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the httpx client if this adapter created it."""
        if self._owns_client:
            await self.client.aclose()

    async def fetch_data(self, path: str = "") -> str:
        """Return the body of a GET request as text."""
        try:
            url = self._build_url(path)
        except FetchError as e:
            logger.error(f"Rejected remote data path: {e}")
            raise

        try:
            response = await self.client.get(url, headers=self._get_headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Remote data request returned {e.response.status_code}",
                extra={"url": url},
            )
            raise FetchError(
                f"GET {url} failed with status {e.response.status_code}",
                cause=e,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL does not derive from HTTPError.
            logger.error(f"Failed to fetch remote data: {e}", extra={"url": url})
            raise FetchError(f"GET {url!r} failed: {e}", cause=e) from e

        logger.debug(f"Fetched {len(response.text)} characters from {url}")
        return response.text
