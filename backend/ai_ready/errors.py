"""
Caller-visible errors for the readiness pipeline.

Only URL validation and page-fetch failures surface to the caller; probe and
enrichment failures are absorbed where they happen.
"""


class ReadinessError(Exception):
    """Base exception for the readiness service."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidURLError(ReadinessError):
    """Missing or unparsable URL."""

    def __init__(self, message: str = "Invalid URL format"):
        super().__init__(message=message, status_code=400)


class UpstreamFetchError(ReadinessError):
    """Page could not be fetched or came back empty."""

    def __init__(self, message: str = "Failed to scrape website. Please check the URL."):
        super().__init__(message=message, status_code=500)
