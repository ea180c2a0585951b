from __future__ import annotations


RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


class UpstreamError(RuntimeError):
    """Base for failures talking to a third-party market data API."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source


class UpstreamRateLimitError(UpstreamError):
    def __init__(self, source: str):
        super().__init__(source, RATE_LIMIT_MESSAGE)
        self.status_code = 429


class UpstreamStatusError(UpstreamError):
    def __init__(self, source: str, status_code: int):
        super().__init__(source, f"API responded with status: {status_code}")
        self.status_code = status_code


class UpstreamUnavailableError(UpstreamError):
    """Network failure or timeout before any HTTP status was received."""
