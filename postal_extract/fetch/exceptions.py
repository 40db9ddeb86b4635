"""Custom exceptions for page fetching."""


class FetchError(Exception):
    """Base exception for all fetch errors.

    Any fetch failure is reported before the extraction engine runs; catching
    this exception catches every way a page can fail to arrive.
    """

    pass


class FetchHTTPError(FetchError):
    """The server answered with a status other than 200, or the connection failed.

    A status_code of 0 means no HTTP response was received at all.
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        """Initialize HTTP error with status code and URL.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (0 for transport failures)
            url: URL that failed
        """
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class FetchTimeoutError(FetchError):
    """The request did not complete within the configured timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class FetchResponseError(FetchError):
    """The response body could not be read or decoded."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url
