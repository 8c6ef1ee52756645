"""Multi-hop swap route assembly.

Given a snapshot of known pairs and two endpoint tokens, the router finds the
route with the fewest hops and returns it as a list of RouterHop objects for
the execution layer.

Native coins get special treatment. The router contract chains hops through
token `Send` callbacks, which native coins do not support, so a native coin
may only be offered into the first hop or received from the last one. Two
rules enforce this:

- Pairs with a native side are dropped unless one of their sides is one of
  the two endpoints.
- During the search, native nodes other than the endpoints are never
  passed through.

Either rule alone leaves gaps (the first still lets two kept native pairs be
joined through their shared native node), so both are applied.

Ties between equally short routes are broken by the order of `known_pairs`.
Callers who need the same answer across differently ordered snapshots should
sort the pairs first.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from hoprouter.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from hoprouter.models.tokens import Token
from hoprouter.routing.errors import (
    NoPairsProvided,
    NoRouteFound,
    PairAlreadyExists,
    SameToken,
)
from hoprouter.routing.identity import TokenIdentity, token_identity
from hoprouter.routing.pathfinding import PathGraph
from hoprouter.routing.types import RouterHop, RouterPair

logger = structlog.get_logger()


def ensure_no_direct_pair(known_pairs: Sequence[RouterPair], token_0: Token, token_1: Token) -> None:
    """Fail if a pool already trades the two tokens.

    Raises:
        PairAlreadyExists: With the address of the first such pool
    """
    for pair in known_pairs:
        if pair.connects(token_0, token_1):
            raise PairAlreadyExists(token_identity(token_0), token_identity(token_1), pair.pool_address)


class Router:
    """Assembles multi-hop routes over a list of known pairs.

    The router holds no state besides its configuration; every call builds
    and discards its own graph, so one instance can be shared freely,
    including across threads.

    Args:
        config: Routing limits and flags. Defaults to DEFAULT_ROUTER_CONFIG.
    """

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_ROUTER_CONFIG

    def assemble(
        self,
        known_pairs: Sequence[RouterPair],
        from_token: Token | None,
        into_token: Token | None,
    ) -> list[RouterHop]:
        """Find the shortest route from one token into another.

        Args:
            known_pairs: Snapshot of pools that may be used as hops
            from_token: Token offered into the first hop
            into_token: Token received from the last hop

        Returns:
            Hops in execution order, at least one

        Raises:
            NoPairsProvided: If known_pairs is empty or an endpoint is missing
            SameToken: If both endpoints are the same token
            PairAlreadyExists: If config.reject_direct_pair is set and a pool
                already trades the two tokens
            InvalidPair: If a pair trades a token with itself
            NoRouteFound: If no route connects the two tokens
        """
        if not known_pairs or from_token is None or into_token is None:
            raise NoPairsProvided()

        from_id = token_identity(from_token)
        into_id = token_identity(into_token)
        if from_id == into_id:
            raise SameToken(from_id)

        if self.config.reject_direct_pair:
            ensure_no_direct_pair(known_pairs, from_token, into_token)

        for pair in known_pairs:
            pair.ensure_distinct_sides()

        endpoints = {from_id, into_id}
        usable = self._usable_pairs(known_pairs, endpoints)
        graph = PathGraph.from_pairs(usable)
        blocked = graph.native_tokens - endpoints

        edges = graph.shortest_path(from_id, into_id, max_hops=self.config.max_hops, blocked=blocked)
        if not edges:
            logger.debug(
                "no_route_found",
                from_token=str(from_id),
                into_token=str(into_id),
                pairs=len(known_pairs),
                max_hops=self.config.max_hops,
            )
            raise NoRouteFound(from_id, into_id)

        hops = [edge.as_hop() for edge in edges]

        logger.info(
            "route_assembled",
            from_token=str(from_id),
            into_token=str(into_id),
            hops=len(hops),
            pools=[hop.pool_address for hop in hops],
        )
        return hops

    @staticmethod
    def _usable_pairs(known_pairs: Sequence[RouterPair], endpoints: set[TokenIdentity]) -> list[RouterPair]:
        """Drop native pairs that do not touch either endpoint."""
        usable = [
            pair
            for pair in known_pairs
            if not pair.has_native() or pair.from_id in endpoints or pair.into_id in endpoints
        ]
        dropped = len(known_pairs) - len(usable)
        if dropped:
            logger.debug("native_pairs_dropped", count=dropped)
        return usable


# Shared instance with the default configuration
default_router = Router()


def assemble_route(
    known_pairs: Sequence[RouterPair],
    from_token: Token | None,
    into_token: Token | None,
) -> list[RouterHop]:
    """Assemble a route with the default router.

    See Router.assemble.
    """
    return default_router.assemble(known_pairs, from_token, into_token)


__all__ = ["Router", "assemble_route", "default_router", "ensure_no_direct_pair"]
