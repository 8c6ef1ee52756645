"""Multi-hop swap route assembler."""

from hoprouter.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from hoprouter.models import CustomToken, NativeToken, Token, custom_token, native_token, parse_token
from hoprouter.pools import PairRegistry
from hoprouter.routing import (
    InvalidPair,
    NoPairsProvided,
    NoRouteFound,
    PairAlreadyExists,
    Router,
    RouterError,
    RouterHop,
    RouterPair,
    SameToken,
    TokenIdentity,
    assemble_route,
    token_identity,
)

__version__ = "0.1.0"
__all__ = [
    "CustomToken",
    "DEFAULT_ROUTER_CONFIG",
    "InvalidPair",
    "NativeToken",
    "NoPairsProvided",
    "NoRouteFound",
    "PairAlreadyExists",
    "PairRegistry",
    "Router",
    "RouterConfig",
    "RouterError",
    "RouterHop",
    "RouterPair",
    "SameToken",
    "Token",
    "TokenIdentity",
    "__version__",
    "assemble_route",
    "custom_token",
    "native_token",
    "parse_token",
    "token_identity",
]
