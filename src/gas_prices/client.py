"""Client for the published per-chain gas price reference feed.

The run controller does not call this yet; reports only say which chains
changed. It is kept so a report can be enriched with the current tiers.
"""

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any

import aiohttp

from ..config.models import GasPriceSourceSettings

logger = logging.getLogger(__name__)


class GasPriceError(Exception):
    """Raised when the gas price feed cannot be fetched or parsed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class GasPriceTiers:
    """Low/average/high gas price for one chain."""

    low: float
    average: float
    high: float

    @classmethod
    def from_api(cls, chain: str, data: Any) -> "GasPriceTiers":
        if not isinstance(data, dict):
            raise GasPriceError(f"Gas prices for {chain!r} are not an object")
        values = {}
        for tier in ("low", "average", "high"):
            value = data.get(tier)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise GasPriceError(f"Gas price {chain!r}.{tier} is not a number")
            values[tier] = float(value)
        return cls(**values)


class GasPriceClient:
    """Fetches the chain -> gas price tiers document."""

    def __init__(
        self,
        settings: GasPriceSourceSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.settings = settings or GasPriceSourceSettings()
        self._session = session

    async def get_gas_prices(self) -> dict[str, GasPriceTiers]:
        """Fetch gas price tiers for every chain in the feed.

        Raises:
            GasPriceError: On transport error, non-200 status or bad body
        """
        url = self.settings.url
        logger.debug(f"Fetching gas prices from {url}")

        try:
            if self._session is not None:
                data = await self._fetch(self._session, url)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._fetch(session, url)
        except TimeoutError as e:
            raise GasPriceError(f"Request timeout for GET {url}") from e
        except aiohttp.ClientError as e:
            raise GasPriceError(f"Connection error for GET {url}: {e}") from e

        if not isinstance(data, dict):
            raise GasPriceError("Gas price feed is not an object")

        return {
            chain: GasPriceTiers.from_api(chain, tiers) for chain, tiers in data.items()
        }

    async def _fetch(self, session: aiohttp.ClientSession, url: str) -> Any:
        async with session.get(url) as response:
            if response.status != 200:
                raise GasPriceError(
                    f"Gas price feed returned HTTP {response.status}",
                    status_code=response.status,
                )
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise GasPriceError(f"Unparseable gas price feed: {e}") from e
