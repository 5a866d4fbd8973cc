"""Unit tests for the reference gas price feed client."""

import aiohttp
import pytest
from aioresponses import aioresponses

from src.config.models import GasPriceSourceSettings
from src.gas_prices.client import GasPriceClient, GasPriceError, GasPriceTiers

FEED_URL = GasPriceSourceSettings().url


class TestGasPriceClient:
    """Test GasPriceClient.get_gas_prices."""

    @pytest.mark.asyncio
    async def test_parses_tiers_per_chain(self) -> None:
        with aioresponses() as mocked:
            mocked.get(
                FEED_URL,
                payload={
                    "cosmoshub": {"low": 0.01, "average": 0.025, "high": 0.03},
                    "osmosis": {"low": 0, "average": 1, "high": 2},
                },
            )

            prices = await GasPriceClient().get_gas_prices()

        assert prices == {
            "cosmoshub": GasPriceTiers(low=0.01, average=0.025, high=0.03),
            "osmosis": GasPriceTiers(low=0.0, average=1.0, high=2.0),
        }

    @pytest.mark.asyncio
    async def test_uses_provided_session(self) -> None:
        with aioresponses() as mocked:
            mocked.get(FEED_URL, payload={})

            async with aiohttp.ClientSession() as session:
                prices = await GasPriceClient(session=session).get_gas_prices()

        assert prices == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            ["not", "a", "mapping"],
            {"juno": "cheap"},
            {"juno": {"low": 1, "average": 2}},
            {"juno": {"low": True, "average": 2, "high": 3}},
        ],
    )
    async def test_malformed_feed(self, payload: object) -> None:
        with aioresponses() as mocked:
            mocked.get(FEED_URL, payload=payload)

            with pytest.raises(GasPriceError):
                await GasPriceClient().get_gas_prices()

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        with aioresponses() as mocked:
            mocked.get(FEED_URL, status=503)

            with pytest.raises(GasPriceError) as exc_info:
                await GasPriceClient().get_gas_prices()

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        with aioresponses() as mocked:
            mocked.get(FEED_URL, exception=aiohttp.ClientConnectionError("refused"))

            with pytest.raises(GasPriceError, match="refused"):
                await GasPriceClient().get_gas_prices()
