"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token symbols and denominations
- factories: Token and pair factory functions
"""

from tests.helpers.constants import (
    BTC,
    ETH,
    JKWON,
    NATIVE_DENOM,
    OTHER_NATIVE_DENOM,
    SHD,
    SIENNA,
    SSCRT,
    TOKEN_CODE_HASH,
)
from tests.helpers.factories import PairListBuilder, make_native, make_pair, make_token

__all__ = [
    # Constants
    "SSCRT",
    "SIENNA",
    "SHD",
    "ETH",
    "BTC",
    "JKWON",
    "TOKEN_CODE_HASH",
    "NATIVE_DENOM",
    "OTHER_NATIVE_DENOM",
    # Factories
    "PairListBuilder",
    "make_native",
    "make_pair",
    "make_token",
]
