"""Pydantic configuration models for the gas price watch job.

Every field defaults to the job's fixed production value, so
``Config()`` is the configuration the scheduled run uses. A YAML file can
override values for local runs (see ``loader``).

The configuration hierarchy follows this structure:
- Config: Root configuration
- SystemConfig: Logging
- GitHubSettings: Where commits are read from
- WatchSettings: What counts as a gas price change and how it is reported
- SlackConfig: Where notifications go
- GasPriceSourceSettings: Reference gas price feed
"""

import re
from enum import Enum
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_TRACKED_FIELDS = [
    "fixed_min_gas_price",
    "low_gas_price",
    "average_gas_price",
    "high_gas_price",
]


def _require_http_url(v: str, *, https_only: bool = False) -> str:
    parsed = urlparse(v)
    allowed = ("https",) if https_only else ("http", "https")
    if parsed.scheme not in allowed or not parsed.netloc:
        raise ValueError(f"Invalid URL: {v!r}")
    return v


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class BaseConfigModel(BaseModel):
    """Base configuration model."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class SystemConfig(BaseConfigModel):
    """Core job settings."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO, description="Logging level for the run"
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string passed to logging.basicConfig",
    )


class GitHubSettings(BaseConfigModel):
    """GitHub repository and API settings."""

    base_url: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )

    owner: str = Field(default="cosmos", description="Owner of the watched repository")

    repo: str = Field(default="chain-registry", description="Watched repository name")

    user_agent: str = Field(
        default="Gas-Price-Watch/1.0", description="User-Agent sent to GitHub"
    )

    request_timeout: int | None = Field(
        default=None,
        ge=1,
        le=600,
        description="Client-side timeout for GitHub calls in seconds "
        "(None keeps the HTTP library default)",
    )

    per_page: int = Field(
        default=100, ge=1, le=100, description="Commits requested per listing call"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate API base URL format."""
        return _require_http_url(v)


class WatchSettings(BaseConfigModel):
    """Change detection and report settings."""

    lookback_hours: float = Field(
        default=6, gt=0, le=24 * 7, description="Length of the commit window in hours"
    )

    tracked_fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TRACKED_FIELDS),
        description="Field names whose presence in a diff marks a gas price change",
    )

    config_file_name: str = Field(
        default="chain.json",
        description="Per-chain configuration file name, directly under the chain",
    )

    commit_url_base: str = Field(
        default="https://github.com/cosmos/chain-registry/commit",
        description="Base URL that commit links in reports are built from",
    )

    max_concurrent_fetches: int | None = Field(
        default=None,
        ge=1,
        description="Cap on concurrent commit detail fetches (None = unbounded)",
    )

    @field_validator("tracked_fields")
    @classmethod
    def validate_tracked_fields(cls, v: list[str]) -> list[str]:
        """Ensure at least one non-empty field name is tracked."""
        fields = [item.strip() for item in v if item and item.strip()]
        if not fields:
            raise ValueError("At least one tracked field is required")
        return fields

    @field_validator("config_file_name")
    @classmethod
    def validate_config_file_name(cls, v: str) -> str:
        """Normalize the file name for case-insensitive path comparison."""
        if not v or "/" in v:
            raise ValueError("Config file name must be a bare file name")
        return v.lower()

    @field_validator("commit_url_base")
    @classmethod
    def validate_commit_url_base(cls, v: str) -> str:
        """Validate commit link base and strip any trailing slash."""
        return _require_http_url(v).rstrip("/")

    def field_pattern(self) -> re.Pattern[str]:
        """Compile the unanchored alternation of tracked field names."""
        return re.compile("|".join(re.escape(name) for name in self.tracked_fields))


class SlackConfig(BaseConfigModel):
    """Slack incoming webhook used for reports and failure alerts."""

    enabled: bool = Field(default=True, description="Send notifications at all")

    webhook_url: str = Field(
        default=(
            "https://hooks.slack.com/services"
            "/T03BQ7YT8H3/B06BT6HFTK5/CQ4Gn5QwtdzXq7aharmEWadW"
        ),
        description="Slack incoming webhook URL (gas price update alert channel)",
    )

    timeout: float = Field(
        default=3.0, gt=0, le=60, description="Hard delivery timeout in seconds"
    )

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str) -> str:
        """Webhook must be reached over HTTPS."""
        return _require_http_url(v, https_only=True)


class GasPriceSourceSettings(BaseConfigModel):
    """Reference gas price feed."""

    url: str = Field(
        default="https://assets.leapwallet.io/cosmos-registry/v1/gas/gas-prices.json",
        description="URL of the chain -> gas price tiers document",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate feed URL format."""
        return _require_http_url(v)


class Config(BaseConfigModel):
    """Root configuration containing all subsystem configurations."""

    system: SystemConfig = Field(
        default_factory=SystemConfig, description="Core job settings"
    )

    github: GitHubSettings = Field(
        default_factory=GitHubSettings, description="GitHub settings"
    )

    watch: WatchSettings = Field(
        default_factory=WatchSettings, description="Change detection settings"
    )

    slack: SlackConfig = Field(
        default_factory=SlackConfig, description="Notification settings"
    )

    gas_prices: GasPriceSourceSettings = Field(
        default_factory=GasPriceSourceSettings,
        description="Reference gas price feed settings",
    )

    @model_validator(mode="after")
    def validate_commit_links_match_repository(self) -> "Config":
        """Commit links must point at the repository being watched."""
        expected = f"/{self.github.owner}/{self.github.repo}/commit"
        if not urlparse(self.watch.commit_url_base).path.endswith(expected):
            raise ValueError(
                f"commit_url_base {self.watch.commit_url_base!r} does not point at "
                f"{self.github.owner}/{self.github.repo}"
            )
        return self

    def summary(self) -> dict[str, Any]:
        """Return a loggable summary with the webhook secret masked."""
        data = self.model_dump()
        parsed = urlparse(data["slack"]["webhook_url"])
        data["slack"]["webhook_url"] = f"{parsed.scheme}://{parsed.netloc}/***"
        return data
