"""GitHub API client package."""

from .client import GitHubClient, GitHubClientConfig, format_timestamp
from .exceptions import (
    GitHubAuthenticationError,
    GitHubConnectionError,
    GitHubError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubResponseError,
    GitHubServerError,
    GitHubTimeoutError,
    GitHubValidationError,
)
from .models import ChangedFile, CommitDetail, CommitRef

__all__ = [
    "ChangedFile",
    "CommitDetail",
    "CommitRef",
    "GitHubAuthenticationError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubConnectionError",
    "GitHubError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubResponseError",
    "GitHubServerError",
    "GitHubTimeoutError",
    "GitHubValidationError",
    "format_timestamp",
]
