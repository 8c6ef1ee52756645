"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hoprouter.constants import (
    HOP_FROM_TOKEN_KEY,
    HOP_PAIR_ADDRESS_KEY,
    HOP_PAIR_CODE_HASH_KEY,
)
from hoprouter.models.tokens import Token
from hoprouter.routing.errors import InvalidPair
from hoprouter.routing.identity import TokenIdentity, token_identity


@dataclass(frozen=True)
class RouterHop:
    """One step of an assembled route.

    The router contract swaps `offered_token` through the pool at
    `pool_address` and feeds the proceeds into the next hop.
    """

    offered_token: Token
    pool_address: str
    pool_code_hash: str

    @property
    def offered_id(self) -> TokenIdentity:
        return token_identity(self.offered_token)

    def to_message(self) -> dict[str, Any]:
        """Return the hop in the shape the router contract expects."""
        return {
            HOP_FROM_TOKEN_KEY: self.offered_token.to_wire(),
            HOP_PAIR_ADDRESS_KEY: self.pool_address,
            HOP_PAIR_CODE_HASH_KEY: self.pool_code_hash,
        }


@dataclass(frozen=True)
class RouterPair:
    """A liquidity pool usable as a hop, seen as an edge between two tokens.

    The two sides are stored directionally but the pool trades both ways;
    `reversed()` gives the same pool seen from the other side.
    """

    from_token: Token
    into_token: Token
    pool_address: str
    pool_code_hash: str

    @property
    def from_id(self) -> TokenIdentity:
        return token_identity(self.from_token)

    @property
    def into_id(self) -> TokenIdentity:
        return token_identity(self.into_token)

    @property
    def is_self_loop(self) -> bool:
        """Both sides resolve to the same token."""
        return self.from_id == self.into_id

    def ensure_distinct_sides(self) -> None:
        """Raise InvalidPair if the pair trades a token with itself."""
        if self.is_self_loop:
            raise InvalidPair(f"Pair {self.pool_address} trades {self.from_id} with itself")

    def has_native(self) -> bool:
        """Check if either side is a native coin."""
        return self.from_id.is_native or self.into_id.is_native

    def contains(self, token: Token) -> bool:
        """Check if the token is one of the two sides."""
        identity = token_identity(token)
        return identity == self.from_id or identity == self.into_id

    def other_side(self, token: Token) -> Token | None:
        """Get the opposite side for a token, or None if it is not in the pair."""
        identity = token_identity(token)
        if identity == self.from_id:
            return self.into_token
        if identity == self.into_id:
            return self.from_token
        return None

    def connects(self, token_a: Token, token_b: Token) -> bool:
        """Check if the pair trades exactly these two tokens (either order)."""
        id_a = token_identity(token_a)
        id_b = token_identity(token_b)
        return {id_a, id_b} == {self.from_id, self.into_id} and id_a != id_b

    def intersection(self, other: RouterPair) -> list[Token]:
        """Tokens of `other` that this pair also contains."""
        result: list[Token] = []
        if self.contains(other.from_token):
            result.append(other.from_token)
        if self.contains(other.into_token):
            result.append(other.into_token)
        return result

    def reversed(self) -> RouterPair:
        """Return the same pool with the two sides swapped."""
        return RouterPair(
            from_token=self.into_token,
            into_token=self.from_token,
            pool_address=self.pool_address,
            pool_code_hash=self.pool_code_hash,
        )

    def as_hop(self) -> RouterHop:
        """Hop that offers `from_token` into this pool."""
        return RouterHop(
            offered_token=self.from_token,
            pool_address=self.pool_address,
            pool_code_hash=self.pool_code_hash,
        )


__all__ = ["RouterHop", "RouterPair"]
