"""Concurrent fan-out of commit detail fetches and matching."""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable, Sequence

from ...github.models import CommitDetail, CommitRef
from .matcher import CHAIN_CONFIG_FILE, GAS_PRICE_PATTERN, find_matches
from .models import GasPriceMatch

logger = logging.getLogger(__name__)

CommitFetcher = Callable[[CommitRef], Awaitable[CommitDetail]]


class ChangeAggregator:
    """Fetches every commit's detail concurrently and collects matches.

    All-or-nothing: the first failing fetch fails ``aggregate`` and no
    matches from the other commits are returned. By default every commit is
    fetched at once; ``max_concurrency`` caps in-flight fetches instead.
    """

    def __init__(
        self,
        fetch_commit: CommitFetcher,
        max_concurrency: int | None = None,
        pattern: re.Pattern[str] = GAS_PRICE_PATTERN,
        config_file_name: str = CHAIN_CONFIG_FILE,
    ) -> None:
        """Initialize the aggregator.

        Args:
            fetch_commit: Coroutine function returning a commit's detail
            max_concurrency: Cap on concurrent fetches, ``None`` for no cap
            pattern: Tracked field pattern passed to the matcher
            config_file_name: Per-chain config file name passed to the matcher
        """
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

        self.fetch_commit = fetch_commit
        self.max_concurrency = max_concurrency
        self.pattern = pattern
        self.config_file_name = config_file_name

    async def aggregate(self, commits: Sequence[CommitRef]) -> list[GasPriceMatch]:
        """Fetch and match all commits, returning the concatenated matches.

        Matches from different commits come back in no particular order.

        Raises:
            Exception: The first error raised by any fetch
        """
        if not commits:
            return []

        semaphore = (
            asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        )

        async def process_commit(ref: CommitRef) -> list[GasPriceMatch]:
            if semaphore is None:
                detail = await self.fetch_commit(ref)
            else:
                async with semaphore:
                    detail = await self.fetch_commit(ref)

            matches = find_matches(detail, self.pattern, self.config_file_name)
            if matches:
                logger.debug(
                    f"Commit {ref.sha[:8]} touched gas prices of "
                    f"{[m.entity_name for m in matches]}"
                )
            return matches

        tasks = [asyncio.create_task(process_commit(ref)) for ref in commits]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return [match for commit_matches in results for match in commit_matches]
