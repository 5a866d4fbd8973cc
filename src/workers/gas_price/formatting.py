"""Slack message text for run reports and failure alerts."""

from collections.abc import Sequence

from .models import GasPriceMatch

SUCCESS_HEADER = ":information_source: Changes have been made for the following chains:"
FAILURE_PREFIX = ":warning: Error occurred while processing commits:"


def commit_link(commit_url_base: str, match: GasPriceMatch) -> str:
    """Slack ``<url|label>`` link to the matching commit, labelled by chain."""
    return f"<{commit_url_base.rstrip('/')}/{match.commit_sha}|{match.entity_name}>"


def format_success(commit_url_base: str, matches: Sequence[GasPriceMatch]) -> str:
    lines = [f"• {commit_link(commit_url_base, match)}" for match in matches]
    return "\n".join([SUCCESS_HEADER, *lines])


def format_failure(error: str) -> str:
    return f"{FAILURE_PREFIX} {error}"
