"""Errors raised by the service adapters and reported by the tool gateway."""

from typing import Optional


class YouTubeServiceError(Exception):
    """Base class for every failure a tool call can report."""


class ConfigurationError(YouTubeServiceError):
    """The API key is missing or unusable."""


class NotFoundError(YouTubeServiceError):
    """The requested identifier does not resolve upstream."""


class UpstreamError(YouTubeServiceError):
    """The YouTube API answered with an error status or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(YouTubeServiceError):
    """The YouTube API answered with a body of unexpected shape."""
