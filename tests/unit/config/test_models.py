"""Unit tests for configuration models.

This module tests that defaults equal the job's fixed production values and
that field validators reject inconsistent settings.
"""

import pytest
from pydantic import ValidationError

from src.config.models import (
    DEFAULT_TRACKED_FIELDS,
    Config,
    GitHubSettings,
    LogLevel,
    SlackConfig,
    WatchSettings,
)


class TestDefaults:
    """Tests for built-in configuration values."""

    def test_default_configuration_matches_fixed_behaviour(self) -> None:
        """
        Why: The scheduled run uses only built-in values
        What: Defaults reproduce the fixed repository, window, fields and timeout
        How: Instantiates Config() and checks every relevant field
        """
        config = Config()

        assert config.github.base_url == "https://api.github.com"
        assert config.github.owner == "cosmos"
        assert config.github.repo == "chain-registry"
        assert config.github.request_timeout is None
        assert config.watch.lookback_hours == 6
        assert config.watch.tracked_fields == DEFAULT_TRACKED_FIELDS
        assert config.watch.config_file_name == "chain.json"
        assert (
            config.watch.commit_url_base
            == "https://github.com/cosmos/chain-registry/commit"
        )
        assert config.watch.max_concurrent_fetches is None
        assert config.slack.timeout == 3.0
        assert config.slack.webhook_url.startswith("https://hooks.slack.com/services/")
        assert config.system.log_level is LogLevel.INFO

    def test_summary_masks_webhook_secret(self) -> None:
        summary = Config().summary()

        assert summary["slack"]["webhook_url"] == (
            "https://hooks.slack.com/***"
        )

    def test_summary_masks_any_webhook_path(self) -> None:
        config = Config(slack={"webhook_url": "https://example.com/hooks/SECRETTOKEN"})

        masked = config.summary()["slack"]["webhook_url"]

        assert masked == "https://example.com/***"
        assert "SECRETTOKEN" not in str(config.summary())


class TestValidation:
    """Tests for field and model validators."""

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Config(unexpected=True)

    def test_webhook_must_be_https(self) -> None:
        with pytest.raises(ValidationError):
            SlackConfig(webhook_url="http://hooks.slack.com/services/x")

    def test_invalid_github_base_url(self) -> None:
        with pytest.raises(ValidationError):
            GitHubSettings(base_url="api.github.com")

    def test_tracked_fields_cannot_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            WatchSettings(tracked_fields=["", "  "])

    def test_config_file_name_normalized(self) -> None:
        assert WatchSettings(config_file_name="Chain.JSON").config_file_name == (
            "chain.json"
        )
        with pytest.raises(ValidationError):
            WatchSettings(config_file_name="osmosis/chain.json")

    def test_commit_url_base_trailing_slash_stripped(self) -> None:
        settings = WatchSettings(
            commit_url_base="https://github.com/cosmos/chain-registry/commit/"
        )
        assert settings.commit_url_base.endswith("/commit")

    def test_commit_links_must_match_repository(self) -> None:
        with pytest.raises(ValidationError, match="does not point at"):
            Config(github={"owner": "someone", "repo": "fork"})

        config = Config(
            github={"owner": "someone", "repo": "fork"},
            watch={"commit_url_base": "https://github.com/someone/fork/commit"},
        )
        assert config.github.repo == "fork"

    def test_lookback_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            WatchSettings(lookback_hours=0)

    def test_max_concurrent_fetches_bounds(self) -> None:
        assert WatchSettings(max_concurrent_fetches=5).max_concurrent_fetches == 5
        with pytest.raises(ValidationError):
            WatchSettings(max_concurrent_fetches=0)


class TestFieldPattern:
    """Tests for the compiled tracked-field pattern."""

    def test_pattern_matches_any_tracked_field(self) -> None:
        pattern = WatchSettings().field_pattern()

        assert pattern.search('"average_gas_price": 0.025')
        assert pattern.search("gas price") is None

    def test_pattern_escapes_field_names(self) -> None:
        pattern = WatchSettings(tracked_fields=["fee.amount"]).field_pattern()

        assert pattern.search("fee.amount")
        assert pattern.search("feeXamount") is None
