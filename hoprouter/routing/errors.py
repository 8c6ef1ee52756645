"""Router error classes.

All of these are validation or search outcomes. None of them is retried by
the router; the caller decides whether to try again with a different pair
snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hoprouter.routing.identity import TokenIdentity


class RouterError(Exception):
    """Base error for route assembly."""

    pass


class NoPairsProvided(RouterError):
    """No token pairs (or no endpoint tokens) were supplied."""

    def __init__(self) -> None:
        super().__init__("Router.assemble: no token pairs provided")


class SameToken(RouterError):
    """Source and destination resolve to the same token."""

    def __init__(self, token: TokenIdentity) -> None:
        self.token = token
        super().__init__(f"Router.assemble: can't swap token with itself ({token})")


class PairAlreadyExists(RouterError):
    """A pair for the two tokens already exists (exchange creation only)."""

    def __init__(self, token_0: TokenIdentity, token_1: TokenIdentity, pool_address: str) -> None:
        self.token_0 = token_0
        self.token_1 = token_1
        self.pool_address = pool_address
        super().__init__(
            f"Router.assemble: a pair for {token_0}/{token_1} already exists ({pool_address})"
        )


class NoRouteFound(RouterError):
    """The pair graph does not connect the two tokens."""

    def __init__(self, from_token: TokenIdentity, into_token: TokenIdentity) -> None:
        self.from_token = from_token
        self.into_token = into_token
        super().__init__(f"Router.assemble: could not find route for {from_token} -> {into_token}")


class InvalidPair(RouterError):
    """A supplied pair is malformed (e.g. both sides are the same token)."""

    pass


__all__ = [
    "InvalidPair",
    "NoPairsProvided",
    "NoRouteFound",
    "PairAlreadyExists",
    "RouterError",
    "SameToken",
]
