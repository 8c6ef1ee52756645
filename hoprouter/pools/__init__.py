"""Pair registry package.

Provides PairRegistry for building the pair snapshots that the router
consumes.
"""

from .registry import (
    ExchangeInfo,
    PairRegistry,
    RouterPairInfo,
    router_pair_from_exchange,
)

__all__ = [
    "ExchangeInfo",
    "PairRegistry",
    "RouterPairInfo",
    "router_pair_from_exchange",
]
