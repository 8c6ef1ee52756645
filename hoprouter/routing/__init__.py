"""Multi-hop route assembly.

Module structure:
- identity.py: TokenIdentity and token_identity()
- types.py: RouterPair and RouterHop value objects
- errors.py: RouterError hierarchy
- pathfinding.py: PathGraph and BFS shortest-path search
- router.py: Router facade enforcing the route rules
"""

from hoprouter.routing.errors import (
    InvalidPair,
    NoPairsProvided,
    NoRouteFound,
    PairAlreadyExists,
    RouterError,
    SameToken,
)
from hoprouter.routing.identity import TokenIdentity, token_identity
from hoprouter.routing.pathfinding import PathGraph
from hoprouter.routing.router import Router, assemble_route, ensure_no_direct_pair
from hoprouter.routing.types import RouterHop, RouterPair

__all__ = [
    "InvalidPair",
    "NoPairsProvided",
    "NoRouteFound",
    "PairAlreadyExists",
    "PathGraph",
    "Router",
    "RouterError",
    "RouterHop",
    "RouterPair",
    "SameToken",
    "TokenIdentity",
    "assemble_route",
    "ensure_no_direct_pair",
    "token_identity",
]
