"""Scheduled entry point for the gas price change watch.

Meant to be triggered periodically by an external scheduler. Takes no
arguments and reads no environment: it runs once with the built-in
configuration and exits. Failures are reported through Slack, never
through the exit status.
"""

import asyncio
import logging
from datetime import UTC, datetime

from src.config.loader import load_config
from src.config.models import Config
from src.github.client import GitHubClient, GitHubClientConfig
from src.notifications.slack import SlackNotifier

from .gas_price.controller import GasPriceRunController
from .gas_price.models import RunResult

logger = logging.getLogger(__name__)


def build_github_client(config: Config) -> GitHubClient:
    settings = config.github
    return GitHubClient(
        GitHubClientConfig(
            base_url=settings.base_url,
            owner=settings.owner,
            repo=settings.repo,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            per_page=settings.per_page,
        )
    )


async def main() -> RunResult:
    """Main entry point for the gas price watch."""
    config = load_config()

    logging.basicConfig(
        level=getattr(logging, config.system.log_level.value),
        format=config.system.log_format,
    )
    logger.info(
        f"Starting gas price watch for {config.github.owner}/{config.github.repo}"
    )
    logger.debug(f"Configuration: {config.summary()}")

    async with build_github_client(config) as github:
        controller = GasPriceRunController(
            github=github,
            notifier=SlackNotifier(config.slack),
            config=config,
        )
        return await controller.run(datetime.now(UTC))


def run() -> None:
    """Console-script wrapper."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
