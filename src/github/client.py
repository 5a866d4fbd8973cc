"""GitHub API client for reading the commit history of one repository."""

import asyncio
import logging
import time
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urljoin

import aiohttp

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
from .models import CommitDetail, CommitRef

logger = logging.getLogger(__name__)

ISO_8601_UTC = "%Y-%m-%dT%H:%M:%SZ"


@dataclass
class GitHubClientConfig:
    """Configuration for GitHub client.

    ``timeout`` of ``None`` leaves aiohttp's own session defaults in place;
    no client-imposed timeout is applied to listing or detail calls.
    """

    base_url: str = "https://api.github.com"
    owner: str = "cosmos"
    repo: str = "chain-registry"
    timeout: int | None = None
    user_agent: str = "Gas-Price-Watch/1.0"
    per_page: int = 100


def format_timestamp(value: datetime) -> str:
    """Render a datetime as the ISO-8601 UTC form GitHub expects."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(ISO_8601_UTC)


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    """Read a numeric header, ignoring absent or malformed values."""
    value = headers.get(name)
    try:
        return int(value) if value else None
    except ValueError:
        logger.debug(f"Ignoring non-numeric {name} header: {value!r}")
        return None


class GitHubClient:
    """Async, unauthenticated client for a single public GitHub repository."""

    def __init__(self, config: GitHubClientConfig | None = None) -> None:
        """Initialize GitHub client.

        Args:
            config: Client configuration
        """
        self.config = config or GitHubClientConfig()

        # HTTP session will be initialized on first use
        self._session: aiohttp.ClientSession | None = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> "GitHubClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def repo_path(self) -> str:
        """API path prefix of the tracked repository."""
        return f"/repos/{self.config.owner}/{self.config.repo}"

    async def _ensure_session(self) -> None:
        """Ensure HTTP session is initialized."""
        if self._session is None or self._session.closed:
            async with self._session_lock:
                if self._session is None or self._session.closed:
                    session_kwargs: dict[str, Any] = {
                        "headers": {
                            "User-Agent": self.config.user_agent,
                            "Accept": "application/vnd.github.v3+json",
                        },
                    }
                    if self.config.timeout is not None:
                        session_kwargs["timeout"] = aiohttp.ClientTimeout(
                            total=self.config.timeout
                        )
                    self._session = aiohttp.ClientSession(**session_kwargs)

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    def _generate_correlation_id(self) -> str:
        """Generate correlation ID for request tracking."""
        return str(uuid.uuid4())[:8]

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[Any, aiohttp.ClientResponse]:
        """Make a single GET request and decode its JSON body.

        Args:
            path: API path (e.g., '/repos/owner/repo/commits')
            params: Query parameters

        Returns:
            Tuple of decoded body and the (already released) response

        Raises:
            GitHubError: Various GitHub API errors
        """
        # urljoin drops the last base segment unless it ends with a slash
        base_url = self.config.base_url.rstrip("/") + "/"
        url = urljoin(base_url, path.lstrip("/"))
        correlation_id = self._generate_correlation_id()

        await self._ensure_session()
        if not self._session:
            raise GitHubConnectionError("Failed to initialize HTTP session")

        start_time = time.time()
        logger.debug(f"GitHub API request [{correlation_id}] GET {url}")

        try:
            async with self._session.get(url, params=params) as response:
                logger.debug(
                    f"GitHub API response [{correlation_id}] "
                    f"{response.status} in {time.time() - start_time:.2f}s"
                )

                if response.status != 200:
                    await self._handle_error_response(response, correlation_id)

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise GitHubResponseError(
                        f"Unparseable response body for GET {url}: {e}",
                        status_code=response.status,
                    ) from e

                return data, response

        except TimeoutError as e:
            raise GitHubTimeoutError(f"Request timeout for GET {url}") from e
        except aiohttp.ClientError as e:
            raise GitHubConnectionError(
                f"Connection error for GET {url}: {e}"
            ) from e

    async def _handle_error_response(
        self, response: aiohttp.ClientResponse, correlation_id: str
    ) -> None:
        """Handle error responses from GitHub API.

        Args:
            response: HTTP response
            correlation_id: Request correlation ID

        Raises:
            GitHubError: Appropriate error based on status code
        """
        try:
            error_data = await response.json(content_type=None)
        except ValueError:
            error_data = None
        if not isinstance(error_data, dict):
            error_data = {"message": await response.text()}

        error_message = error_data.get("message") or f"HTTP {response.status}"

        logger.warning(
            f"GitHub API error [{correlation_id}] {response.status}: {error_message}"
        )

        if response.status == 401:
            raise GitHubAuthenticationError(error_message, response.status, error_data)
        elif response.status == 403:
            if "rate limit" in error_message.lower():
                reset_time = _header_int(response.headers, "X-RateLimit-Reset")
                remaining = _header_int(response.headers, "X-RateLimit-Remaining")
                limit = _header_int(response.headers, "X-RateLimit-Limit")

                raise GitHubRateLimitError(
                    error_message,
                    reset_time=reset_time,
                    remaining=remaining or 0,
                    limit=limit or 0,
                )
            raise GitHubAuthenticationError(error_message, response.status, error_data)
        elif response.status == 404:
            raise GitHubNotFoundError(error_message, response.status, error_data)
        elif response.status == 422:
            raise GitHubValidationError(error_message, response.status, error_data)
        elif 500 <= response.status < 600:
            raise GitHubServerError(error_message, response.status, error_data)
        else:
            raise GitHubError(error_message, response.status, error_data)

    async def list_commits(self, since: datetime, until: datetime) -> list[CommitRef]:
        """List commits made to the repository within a time window.

        The bounds are passed straight to GitHub's ``since``/``until``
        filters; no client-side filtering is done. Only the first page is
        read.

        Args:
            since: Window start
            until: Window end

        Returns:
            Commit references in the order GitHub returned them
        """
        params = {
            "since": format_timestamp(since),
            "until": format_timestamp(until),
            "per_page": self.config.per_page,
        }
        data, response = await self._get_json(f"{self.repo_path}/commits", params)

        if not isinstance(data, list):
            raise GitHubResponseError(
                f"Commit listing is not a list: {type(data).__name__}"
            )

        if "next" in response.links:
            # TODO: follow the Link header once a window can exceed one page
            logger.warning(
                f"Commit listing for {params['since']}..{params['until']} has more "
                f"than {self.config.per_page} commits; only the first page is used"
            )

        return [CommitRef.from_api(item) for item in data]

    async def get_commit(self, ref: CommitRef) -> CommitDetail:
        """Fetch the changed files of a single commit.

        Args:
            ref: Commit to fetch

        Returns:
            Commit detail with its changed files
        """
        data, _ = await self._get_json(f"{self.repo_path}/commits/{ref.sha}")
        return CommitDetail.from_api(ref, data)
