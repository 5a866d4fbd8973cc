"""Decides whether a changed file is a gas price edit to a chain config.

A file is interesting when it sits at ``<chain>/chain.json`` (compared
case-insensitively) and its diff text mentions any tracked field name.

The field search is a plain substring search over the whole patch, so a
tracked name that only appears in an unchanged context line still counts.
"""

import re

from ...config.models import DEFAULT_TRACKED_FIELDS
from ...github.models import CommitDetail
from .models import GasPriceMatch

GAS_PRICE_PATTERN = re.compile(
    "|".join(re.escape(name) for name in DEFAULT_TRACKED_FIELDS)
)

CHAIN_CONFIG_FILE = "chain.json"


def is_interesting_change(
    path: str,
    diff_text: str | None,
    pattern: re.Pattern[str] = GAS_PRICE_PATTERN,
    config_file_name: str = CHAIN_CONFIG_FILE,
) -> str | None:
    """Return the chain name if ``path``/``diff_text`` is a gas price edit.

    Args:
        path: Repository-relative file path, e.g. ``Osmosis/chain.json``
        diff_text: Unified-diff patch for the file; may be missing
        pattern: Tracked field pattern
        config_file_name: Lower-case name of the per-chain config file

    Returns:
        The first path segment in its original casing, or ``None``
    """
    segments = path.lower().split("/")
    if len(segments) < 2 or segments[1] != config_file_name:
        return None

    if not diff_text:
        return None

    if pattern.search(diff_text) is None:
        return None

    return path.split("/")[0]


def find_matches(
    detail: CommitDetail,
    pattern: re.Pattern[str] = GAS_PRICE_PATTERN,
    config_file_name: str = CHAIN_CONFIG_FILE,
) -> list[GasPriceMatch]:
    """One match per interesting file of a commit, in file order."""
    matches = []
    for changed_file in detail.files:
        entity = is_interesting_change(
            changed_file.path, changed_file.diff_text, pattern, config_file_name
        )
        if entity is not None:
            matches.append(GasPriceMatch(entity_name=entity, commit_sha=detail.sha))
    return matches
