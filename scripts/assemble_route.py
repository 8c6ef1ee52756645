#!/usr/bin/env python3
"""Assemble a swap route from a JSON pair snapshot.

Usage:
    python scripts/assemble_route.py --pairs pairs.json \\
        --from '{"custom_token": {"contract_addr": "secret1...", "token_code_hash": "..."}}' \\
        --into '{"native_token": {"denom": "uscrt"}}'

The pairs file holds a JSON list of either serialized router pairs
({"from_token", "into_token", "pair_address", "pair_code_hash"}) or factory
exchange listings ({"pair": {"token_0", "token_1"}, "address"}). Exchange
listings without their own code hash need --code-hash.

Routing limits are read from HOPROUTER_MAX_HOPS and
HOPROUTER_REJECT_DIRECT_PAIR; --max-hops overrides the environment.

Prints the hop messages as JSON. Exits with 1 when no route can be built.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import structlog
from pydantic import ValidationError

from hoprouter.config import RouterConfig
from hoprouter.models.tokens import parse_token
from hoprouter.pools import PairRegistry
from hoprouter.routing import InvalidPair, Router, RouterError

logger = structlog.get_logger()


def load_registry(path: Path, code_hash: str | None) -> PairRegistry:
    """Load a pair snapshot file into a registry."""
    with open(path) as f:
        entries = json.load(f)

    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a JSON list of pairs")

    registry = PairRegistry()
    # File order is kept; it breaks ties between equally short routes
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: entry {index} is not a JSON object")
        if "pair" in entry:
            registry.add_exchanges([entry], code_hash=code_hash)
        else:
            registry.add_pair_infos([entry])
    return registry


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Assemble a multi-hop swap route")
    parser.add_argument("--pairs", type=Path, required=True, help="JSON file with known pairs")
    parser.add_argument("--from", dest="from_token", required=True, help="Offered token (JSON)")
    parser.add_argument("--into", dest="into_token", required=True, help="Wanted token (JSON)")
    parser.add_argument("--code-hash", help="Exchange code hash for listings without one")
    parser.add_argument("--max-hops", type=int, help="Maximum route length")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    if not args.pairs.exists():
        logger.error("pairs_file_not_found", path=str(args.pairs))
        return 1

    try:
        from_token = parse_token(json.loads(args.from_token))
        into_token = parse_token(json.loads(args.into_token))
        registry = load_registry(args.pairs, args.code_hash)
        config = RouterConfig.from_env()
        if args.max_hops is not None:
            config = replace(config, max_hops=args.max_hops)
        router = Router(config)
    except (ValueError, ValidationError, InvalidPair) as e:
        # json.JSONDecodeError is a ValueError
        logger.error("invalid_input", error=str(e))
        return 1

    try:
        hops = registry.assemble(from_token, into_token, router=router)
    except RouterError as e:
        logger.error("route_failed", kind=type(e).__name__, error=str(e))
        return 1

    print(json.dumps([hop.to_message() for hop in hops], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
