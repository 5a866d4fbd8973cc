"""Gas price change watch for the chain registry.

Lists the commits of the last few hours, finds the ones that touched gas
price fields in a chain's ``chain.json`` and reports them to Slack.
"""

from .aggregator import ChangeAggregator
from .controller import GasPriceRunController, describe_error, run
from .formatting import format_failure, format_success
from .matcher import GAS_PRICE_PATTERN, find_matches, is_interesting_change
from .models import GasPriceMatch, RunResult, RunState, TimeWindow

__all__ = [
    "GAS_PRICE_PATTERN",
    "ChangeAggregator",
    "GasPriceMatch",
    "GasPriceRunController",
    "RunResult",
    "RunState",
    "TimeWindow",
    "describe_error",
    "find_matches",
    "format_failure",
    "format_success",
    "is_interesting_change",
    "run",
]
