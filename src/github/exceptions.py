"""GitHub API client exceptions.

Every failure to list commits or fetch commit details surfaces as a
``GitHubError`` subclass. None of them are retried.
"""

from typing import Any


class GitHubError(Exception):
    """Base exception for upstream GitHub API failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
    ):
        """Initialize GitHub error.

        Args:
            message: Error message
            status_code: HTTP status code
            response_data: Response data from GitHub API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class GitHubAuthenticationError(GitHubError):
    """Raised when GitHub rejects the request as unauthorized."""


class GitHubRateLimitError(GitHubError):
    """Raised when rate limit is exceeded.

    The job does not wait for the reset; the error aborts the run like any
    other upstream failure.
    """

    def __init__(
        self,
        message: str,
        reset_time: int | None = None,
        remaining: int = 0,
        limit: int = 0,
    ):
        super().__init__(message, status_code=403)
        self.reset_time = reset_time
        self.remaining = remaining
        self.limit = limit


class GitHubNotFoundError(GitHubError):
    """Raised when resource is not found."""


class GitHubValidationError(GitHubError):
    """Raised when request validation fails."""


class GitHubServerError(GitHubError):
    """Raised when GitHub server returns 5xx error."""


class GitHubConnectionError(GitHubError):
    """Raised when connection to GitHub fails."""


class GitHubTimeoutError(GitHubError):
    """Raised when request times out."""


class GitHubResponseError(GitHubError):
    """Raised when a response body cannot be parsed into the expected shape."""
