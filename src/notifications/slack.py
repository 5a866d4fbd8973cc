"""Slack incoming-webhook notifier."""

import logging

import aiohttp

from ..config.models import SlackConfig
from .exceptions import NotificationDeliveryError

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Posts plain-text messages to a Slack incoming webhook.

    Each ``notify`` call opens a short-lived session bounded by the
    configured total timeout; a request still in flight when it expires is
    aborted. Delivery failures are logged and never raised.
    """

    def __init__(self, config: SlackConfig | None = None) -> None:
        self.config = config or SlackConfig()

    async def notify(self, message: str) -> None:
        """Deliver ``message``; log and return normally on any failure."""
        if not self.config.enabled:
            logger.info("Slack notifications disabled; message not sent")
            return

        try:
            await self._post(message)
        except NotificationDeliveryError as e:
            logger.error(f"Error sending slack message: {e}")
        except Exception as e:
            logger.error(f"Unexpected error sending slack message: {e}", exc_info=True)
        else:
            logger.debug("Slack message delivered")

    async def _post(self, message: str) -> None:
        """POST ``{"text": message}`` to the webhook.

        Raises:
            NotificationDeliveryError: On timeout, transport error or non-2xx
        """
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.config.webhook_url, json={"text": message}
                ) as response:
                    if not 200 <= response.status < 300:
                        raise NotificationDeliveryError(
                            f"Slack webhook returned HTTP {response.status}",
                            status_code=response.status,
                        )
        except TimeoutError as e:
            raise NotificationDeliveryError(
                f"Slack webhook timed out after {self.config.timeout:g}s"
            ) from e
        except aiohttp.ClientError as e:
            raise NotificationDeliveryError(
                f"Slack webhook connection failed: {e}"
            ) from e
