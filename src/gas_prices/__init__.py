"""Reference gas price feed."""

from .client import GasPriceClient, GasPriceError, GasPriceTiers

__all__ = [
    "GasPriceClient",
    "GasPriceError",
    "GasPriceTiers",
]
