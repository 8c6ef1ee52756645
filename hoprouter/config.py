"""Router configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from hoprouter.constants import ENV_MAX_HOPS, ENV_REJECT_DIRECT_PAIR

_TRUTHY = ("true", "1", "yes")
_FALSY = ("false", "0", "no", "")


@dataclass(frozen=True)
class RouterConfig:
    """Centralized configuration for route assembly.

    Attributes:
        max_hops: Longest route the router may return. None means the route
            length is bounded only by the pair graph.
        reject_direct_pair: If True, fail with PairAlreadyExists when a pool
            already trades the two requested tokens. Used by the exchange
            creation flow; plain swap routing leaves it off and returns the
            direct pool as a single hop.
    """

    max_hops: int | None = None
    reject_direct_pair: bool = False

    def __post_init__(self) -> None:
        if self.max_hops is not None and self.max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {self.max_hops}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RouterConfig:
        """Load configuration from environment variables.

        - HOPROUTER_MAX_HOPS: positive integer (default: unlimited)
        - HOPROUTER_REJECT_DIRECT_PAIR: true/1/yes or false/0/no (default: false)

        Raises:
            ValueError: If a variable holds an unparseable value
        """
        env = os.environ if environ is None else environ

        max_hops: int | None = None
        raw_max_hops = env.get(ENV_MAX_HOPS, "").strip()
        if raw_max_hops:
            try:
                max_hops = int(raw_max_hops)
            except ValueError as err:
                raise ValueError(f"{ENV_MAX_HOPS} must be an integer: '{raw_max_hops}'") from err

        raw_reject = env.get(ENV_REJECT_DIRECT_PAIR, "").strip().lower()
        if raw_reject in _TRUTHY:
            reject_direct_pair = True
        elif raw_reject in _FALSY:
            reject_direct_pair = False
        else:
            raise ValueError(f"{ENV_REJECT_DIRECT_PAIR} must be a boolean: '{raw_reject}'")

        return cls(max_hops=max_hops, reject_direct_pair=reject_direct_pair)


# Default configuration instance
DEFAULT_ROUTER_CONFIG = RouterConfig()
