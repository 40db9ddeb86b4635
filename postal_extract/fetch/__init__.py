"""Page retrieval and HTML-to-text conversion.

Usage:
    from postal_extract.fetch import PageFetcher, html_to_text
    with PageFetcher(timeout=30) as fetcher:
        text = html_to_text(fetcher.fetch(url))

Exception handling:
    from postal_extract.fetch import FetchError, FetchHTTPError, FetchTimeoutError, FetchResponseError
"""

from .client import PageFetcher
from .exceptions import FetchError, FetchHTTPError, FetchResponseError, FetchTimeoutError
from .html import html_to_text

__all__ = [
    "PageFetcher",
    "html_to_text",
    # Exceptions
    "FetchError",
    "FetchHTTPError",
    "FetchTimeoutError",
    "FetchResponseError",
]
