"""Run controller for the gas price change watch.

One run lists the commits of the look-back window, fans out to fetch and
match every commit, then reports. It walks
``IDLE -> LISTING -> AGGREGATING -> REPORTING -> DONE``; a failure while
listing or aggregating jumps straight to ``REPORTING`` with a failure
result. Each run produces exactly one ``RunResult`` and at most one
notification.
"""

import logging
from datetime import datetime, timedelta

from ...config.models import Config
from ...github.client import GitHubClient
from ...notifications.slack import SlackNotifier
from .aggregator import ChangeAggregator
from .formatting import format_failure, format_success
from .models import RunResult, RunState, TimeWindow

logger = logging.getLogger(__name__)


def describe_error(error: BaseException) -> str:
    """Human-readable one-line description of a pipeline failure."""
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


class GasPriceRunController:
    """Orchestrates a single watch run."""

    def __init__(
        self,
        github: GitHubClient,
        notifier: SlackNotifier,
        config: Config | None = None,
        aggregator: ChangeAggregator | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            github: Client used to list and fetch commits
            notifier: Destination of the report or failure alert
            config: Job configuration, defaults to the built-in one
            aggregator: Fan-out aggregator; built from ``github`` when omitted
        """
        self.github = github
        self.notifier = notifier
        self.config = config or Config()
        self.aggregator = aggregator or ChangeAggregator(
            github.get_commit,
            max_concurrency=self.config.watch.max_concurrent_fetches,
            pattern=self.config.watch.field_pattern(),
            config_file_name=self.config.watch.config_file_name,
        )

        self.state = RunState.IDLE
        self.transitions: list[RunState] = [RunState.IDLE]

    def _transition(self, state: RunState) -> None:
        logger.debug(f"Run state {self.state.value} -> {state.value}")
        self.state = state
        self.transitions.append(state)

    def compute_window(self, now: datetime) -> TimeWindow:
        """Look-back window ending at ``now``."""
        return TimeWindow.ending_at(
            now, timedelta(hours=self.config.watch.lookback_hours)
        )

    async def run(self, now: datetime) -> RunResult:
        """Execute one run as of ``now`` and report the outcome.

        Never raises for pipeline or delivery failures; those end up in the
        returned result and in the failure notification.
        """
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"Run already executed (state: {self.state.value})")

        result = await self._collect(now)

        self._transition(RunState.REPORTING)
        await self._report(result)

        self._transition(RunState.DONE)
        logger.info(f"Run finished: {result}")
        return result

    async def _collect(self, now: datetime) -> RunResult:
        window = self.compute_window(now)
        try:
            self._transition(RunState.LISTING)
            commits = await self.github.list_commits(window.start, window.end)
            logger.info(f"Number of commits: {len(commits)}")

            self._transition(RunState.AGGREGATING)
            matches = await self.aggregator.aggregate(commits)
            logger.info(f"Updated chains: {[m.entity_name for m in matches]}")

        except Exception as e:
            logger.error(
                f"Processing failed in {self.state.value} state: {e}", exc_info=True
            )
            return RunResult.failed(describe_error(e))

        return RunResult.succeeded(matches)

    async def _report(self, result: RunResult) -> None:
        if not result.should_notify:
            logger.info("No gas price changes found; nothing to report")
            return

        if result.success:
            message = format_success(self.config.watch.commit_url_base, result.matches)
        else:
            message = format_failure(result.error or "unknown error")

        await self.notifier.notify(message)


async def run(
    now: datetime,
    github: GitHubClient,
    notifier: SlackNotifier,
    config: Config | None = None,
) -> RunResult:
    """Run the watch once as of ``now`` with a fresh controller."""
    controller = GasPriceRunController(github, notifier, config)
    return await controller.run(now)
