"""HTTP retrieval of web pages.

Only a 200 response counts as success. There is no retry or backoff: any
other status, timeout or transport failure is raised to the caller.
"""

from typing import Optional

import requests

from postal_extract.logging import get_logger

from .exceptions import FetchHTTPError, FetchResponseError, FetchTimeoutError

logger = get_logger(__name__, component="fetch")


class PageFetcher:
    """Fetches raw page markup over HTTP.

    Attributes:
        timeout: HTTP request timeout in seconds
        user_agent: User-Agent header for HTTP requests
    """

    def __init__(
        self,
        timeout: int = 30,
        user_agent: str = "PostalAddressExtractor/1.0",
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: HTTP request timeout in seconds (range 5-300)
            user_agent: User-Agent header for requests
            session: Optional pre-built session (a new one is created otherwise)

        Raises:
            ValueError: If timeout is outside the valid range or user_agent is empty
        """
        if not 5 <= timeout <= 300:
            raise ValueError(f"Timeout must be between 5 and 300 seconds, got: {timeout}")
        if not user_agent or not user_agent.strip():
            raise ValueError("user_agent cannot be empty")

        self.timeout = timeout
        self.user_agent = user_agent.strip()

        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": self.user_agent})

    def fetch(self, url: str) -> str:
        """GET a page and return its body as text.

        Args:
            url: Page URL

        Returns:
            Decoded response body

        Raises:
            FetchHTTPError: On any status other than 200, or connection failure
            FetchTimeoutError: On request timeout
            FetchResponseError: If the body cannot be read or decoded
        """
        logger.debug(
            f"HTTP GET request to {url}",
            extra={"event": "fetch.request", "url": url, "timeout": self.timeout},
        )

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(
                f"Request to {url} timed out after {self.timeout} seconds",
                extra={"event": "fetch.error", "error_type": "Timeout", "url": url},
            )
            raise FetchTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds", url=url
            ) from e
        except (
            requests.exceptions.ContentDecodingError,
            requests.exceptions.ChunkedEncodingError,
        ) as e:
            logger.error(
                f"Failed to read response body from {url}",
                extra={"event": "fetch.error", "error_type": type(e).__name__, "url": url},
            )
            raise FetchResponseError(f"Failed to read response body from {url}: {e}", url=url) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"Request to {url} failed: {e}",
                extra={"event": "fetch.error", "error_type": type(e).__name__, "url": url},
            )
            raise FetchHTTPError(f"Request to {url} failed: {e}", status_code=0, url=url) from e

        if response.status_code != 200:
            logger.error(
                f"HTTP {response.status_code} from {url}",
                extra={
                    "event": "fetch.error",
                    "status_code": response.status_code,
                    "url": url,
                },
            )
            raise FetchHTTPError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=url,
            )

        try:
            body = response.text
        except (UnicodeDecodeError, LookupError) as e:
            raise FetchResponseError(f"Failed to decode response body from {url}: {e}", url=url) from e

        logger.debug(
            "HTTP request succeeded",
            extra={
                "event": "fetch.succeeded",
                "status_code": response.status_code,
                "url": url,
                "content_length": len(body),
            },
        )
        return body

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False
