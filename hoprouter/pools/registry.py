"""Pair registry for building routing snapshots.

This module turns already-fetched pool data into RouterPair objects:
- factory `list_exchanges` entries (ExchangeInfo)
- serialized router pairs (RouterPairInfo)

PairRegistry collects them into the immutable snapshot that the router
consumes. It performs no network access; fetching the data is the caller's
job.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import BaseModel

from hoprouter.models.tokens import Token
from hoprouter.models.types import Address, CodeHash
from hoprouter.routing.errors import InvalidPair
from hoprouter.routing.router import Router, default_router
from hoprouter.routing.types import RouterHop, RouterPair

logger = structlog.get_logger()


class ExchangePair(BaseModel):
    """The two tokens traded by an exchange."""

    token_0: Token
    token_1: Token


class ContractLink(BaseModel):
    """Address and code hash of a deployed contract."""

    address: Address
    code_hash: CodeHash | None = None


class ExchangeInfo(BaseModel):
    """One entry of the factory's exchange listing.

    Older factories report the exchange address directly, newer ones nest it
    in a contract link together with the code hash.
    """

    pair: ExchangePair
    address: Address | None = None
    contract: ContractLink | None = None

    @property
    def pool_address(self) -> str | None:
        if self.address is not None:
            return self.address
        if self.contract is not None:
            return self.contract.address
        return None

    @property
    def pool_code_hash(self) -> str | None:
        return self.contract.code_hash if self.contract is not None else None


class RouterPairInfo(BaseModel):
    """A router pair in its serialized form."""

    from_token: Token
    into_token: Token
    pair_address: Address
    pair_code_hash: CodeHash

    def to_router_pair(self) -> RouterPair:
        return RouterPair(
            from_token=self.from_token,
            into_token=self.into_token,
            pool_address=self.pair_address,
            pool_code_hash=self.pair_code_hash,
        )


def router_pair_from_exchange(
    token_0: Token | None,
    token_1: Token | None,
    address: str | None,
    code_hash: str | None,
) -> RouterPair:
    """Convert exchange data to a RouterPair.

    Raises:
        InvalidPair: If a token, the address or the code hash is missing,
            or if both tokens are the same
    """
    if token_0 is None:
        raise InvalidPair("Exchange: cannot convert to RouterPair if token_0 is missing")
    if token_1 is None:
        raise InvalidPair("Exchange: cannot convert to RouterPair if token_1 is missing")
    if not address:
        raise InvalidPair("Exchange: cannot convert to RouterPair if address is missing")
    if not code_hash:
        raise InvalidPair(f"Exchange {address}: cannot convert to RouterPair if code hash is missing")

    pair = RouterPair(
        from_token=token_0,
        into_token=token_1,
        pool_address=address,
        pool_code_hash=code_hash,
    )
    pair.ensure_distinct_sides()
    return pair


class PairRegistry:
    """Collects pairs into a routing snapshot.

    Pairs keep their insertion order, which is the order the router uses to
    break ties between equally short routes. A pool is registered at most
    once; later entries with the same pool address are skipped.
    """

    def __init__(self, pairs: Iterable[RouterPair] | None = None) -> None:
        """Initialize the registry with optional pairs."""
        self._pairs: list[RouterPair] = []
        self._by_address: dict[str, RouterPair] = {}

        if pairs:
            for pair in pairs:
                self.add_pair(pair)

    def add_pair(self, pair: RouterPair) -> bool:
        """Add a pair.

        Returns:
            True if added, False if a pair with the same pool address exists
        """
        if pair.pool_address in self._by_address:
            logger.warning("duplicate_pair_skipped", pool_address=pair.pool_address)
            return False
        self._pairs.append(pair)
        self._by_address[pair.pool_address] = pair
        return True

    def add_exchanges(
        self,
        exchanges: Iterable[ExchangeInfo | Mapping[str, Any]],
        code_hash: str | None = None,
    ) -> int:
        """Add pairs from factory exchange listings.

        Args:
            exchanges: Listing entries, parsed or raw
            code_hash: Exchange code hash, used for entries that do not
                       carry their own

        Returns:
            Number of pairs added

        Raises:
            pydantic.ValidationError: If a raw entry is malformed
            InvalidPair: If an entry lacks an address or code hash
        """
        added = 0
        for entry in exchanges:
            info = entry if isinstance(entry, ExchangeInfo) else ExchangeInfo.model_validate(entry)
            pair = router_pair_from_exchange(
                info.pair.token_0,
                info.pair.token_1,
                info.pool_address,
                info.pool_code_hash or code_hash,
            )
            if self.add_pair(pair):
                added += 1
        return added

    def add_pair_infos(self, infos: Iterable[RouterPairInfo | Mapping[str, Any]]) -> int:
        """Add serialized router pairs.

        Returns:
            Number of pairs added
        """
        added = 0
        for entry in infos:
            info = entry if isinstance(entry, RouterPairInfo) else RouterPairInfo.model_validate(entry)
            pair = info.to_router_pair()
            pair.ensure_distinct_sides()
            if self.add_pair(pair):
                added += 1
        return added

    def get_pair(self, token_a: Token, token_b: Token) -> RouterPair | None:
        """Get the first registered pair trading the two tokens."""
        for pair in self._pairs:
            if pair.connects(token_a, token_b):
                return pair
        return None

    @property
    def pairs(self) -> tuple[RouterPair, ...]:
        """Snapshot of the registered pairs."""
        return tuple(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def assemble(
        self,
        from_token: Token | None,
        into_token: Token | None,
        router: Router | None = None,
    ) -> list[RouterHop]:
        """Assemble a route over the current snapshot.

        See Router.assemble for the errors raised.
        """
        return (router or default_router).assemble(self.pairs, from_token, into_token)


__all__ = [
    "ContractLink",
    "ExchangeInfo",
    "ExchangePair",
    "PairRegistry",
    "RouterPairInfo",
    "router_pair_from_exchange",
]
