"""Pytest configuration and fixtures."""

import pytest

from hoprouter.routing import Router
from hoprouter.routing.types import RouterPair
from tests.helpers import BTC, ETH, JKWON, SHD, SIENNA, SSCRT, PairListBuilder

# =============================================================================
# Pair snapshots
# =============================================================================


@pytest.fixture
def chain_pairs() -> list[RouterPair]:
    """SSCRT-SIENNA-SHD-ETH-BTC chain with a SHD-BTC shortcut.

    pair_0 SSCRT-SIENNA, pair_1 SIENNA-SHD, pair_2 SHD-ETH,
    pair_3 ETH-BTC, pair_4 SHD-BTC
    """
    builder = PairListBuilder()
    builder.pair(SSCRT, SIENNA)
    builder.pair(SIENNA, SHD)
    builder.pair(SHD, ETH)
    builder.pair(ETH, BTC)
    builder.pair(SHD, BTC)
    return builder.pairs


@pytest.fixture
def multiple_roots_pairs() -> list[RouterPair]:
    """Two pairs leave SSCRT; the JKWON branch reaches BTC first.

    pair_0 SSCRT-SIENNA, pair_1 SIENNA-SHD, pair_2 SHD-ETH,
    pair_3 SSCRT-JKWON, pair_4 ETH-BTC, pair_5 SHD-BTC, pair_6 BTC-JKWON
    """
    builder = PairListBuilder()
    builder.pair(SSCRT, SIENNA)
    builder.pair(SIENNA, SHD)
    builder.pair(SHD, ETH)
    builder.pair(SSCRT, JKWON)
    builder.pair(ETH, BTC)
    builder.pair(SHD, BTC)
    builder.pair(BTC, JKWON)
    return builder.pairs


@pytest.fixture
def endpoint_native_pairs() -> list[RouterPair]:
    """Both endpoints (SSCRT and BTC) have a native pair.

    pair_0 SSCRT-SIENNA, pair_1 SIENNA-SHD, pair_2 SHD-ETH,
    pair_3 SSCRT-JKWON, pair_4 SSCRT-native, pair_5 ETH-BTC, pair_6 BTC-native
    """
    builder = PairListBuilder()
    builder.pair(SSCRT, SIENNA)
    builder.pair(SIENNA, SHD)
    builder.pair(SHD, ETH)
    builder.pair(SSCRT, JKWON)
    builder.native_pair(SSCRT)
    builder.pair(ETH, BTC)
    builder.native_pair(BTC)
    return builder.pairs


@pytest.fixture
def midpoint_native_pairs() -> list[RouterPair]:
    """JKWON and BTC both have a native pair, JKWON is not an endpoint.

    pair_0 SSCRT-SIENNA, pair_1 SIENNA-SHD, pair_2 SHD-ETH,
    pair_3 SSCRT-JKWON, pair_4 JKWON-native, pair_5 ETH-BTC, pair_6 BTC-native
    """
    builder = PairListBuilder()
    builder.pair(SSCRT, SIENNA)
    builder.pair(SIENNA, SHD)
    builder.pair(SHD, ETH)
    builder.pair(SSCRT, JKWON)
    builder.native_pair(JKWON)
    builder.pair(ETH, BTC)
    builder.native_pair(BTC)
    return builder.pairs


# =============================================================================
# Routers
# =============================================================================


@pytest.fixture
def router() -> Router:
    """A router with the default configuration."""
    return Router()
