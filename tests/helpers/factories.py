"""Factory functions for creating test objects.

Usage:
    from tests.helpers import PairListBuilder, make_token

    builder = PairListBuilder()
    builder.pair(SSCRT, SIENNA)   # pool "pair_0"
    builder.native_pair(BTC)      # pool "pair_1"
    pairs = builder.pairs
"""

from hoprouter.models.tokens import CustomToken, NativeToken, custom_token, native_token
from hoprouter.routing.types import RouterPair
from tests.helpers.constants import NATIVE_DENOM, TOKEN_CODE_HASH


def make_token(symbol: str, code_hash: str = TOKEN_CODE_HASH) -> CustomToken:
    """Create a custom token whose contract address is its symbol."""
    return custom_token(symbol, code_hash)


def make_native(denom: str = NATIVE_DENOM) -> NativeToken:
    """Create a native coin descriptor."""
    return native_token(denom)


def make_pair(
    token_1: str,
    token_2: str,
    pool_address: str = "pair_0",
    pool_code_hash: str = "pair_code_hash_0",
) -> RouterPair:
    """Create a pair between two custom tokens."""
    return RouterPair(
        from_token=make_token(token_1),
        into_token=make_token(token_2),
        pool_address=pool_address,
        pool_code_hash=pool_code_hash,
    )


class PairListBuilder:
    """Builds pair lists with sequential pool addresses.

    The n-th pair added gets pool address "pair_<n>" and code hash
    "pair_code_hash_<n>", so tests can assert routes by pool address.
    """

    def __init__(self) -> None:
        self.pairs: list[RouterPair] = []

    def _next_pool(self) -> tuple[str, str]:
        index = len(self.pairs)
        return f"pair_{index}", f"pair_code_hash_{index}"

    def pair(self, token_1: str, token_2: str) -> RouterPair:
        """Add a pair between two custom tokens."""
        address, code_hash = self._next_pool()
        pair = make_pair(token_1, token_2, address, code_hash)
        self.pairs.append(pair)
        return pair

    def native_pair(self, token: str, denom: str = NATIVE_DENOM) -> RouterPair:
        """Add a pair between a custom token and a native coin."""
        address, code_hash = self._next_pool()
        pair = RouterPair(
            from_token=make_token(token),
            into_token=make_native(denom),
            pool_address=address,
            pool_code_hash=code_hash,
        )
        self.pairs.append(pair)
        return pair
