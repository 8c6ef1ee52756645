"""Constants shared across the router.

Centralizes well-known denominations and the hop message keys expected by
the on-chain router contract.
"""

# Denomination of the chain's gas token
DEFAULT_NATIVE_DENOM = "uscrt"

# Hop message keys (router contract `Receive` payload)
HOP_FROM_TOKEN_KEY = "from_token"
HOP_PAIR_ADDRESS_KEY = "pair_address"
HOP_PAIR_CODE_HASH_KEY = "pair_code_hash"

# Environment variables read by RouterConfig.from_env()
ENV_MAX_HOPS = "HOPROUTER_MAX_HOPS"
ENV_REJECT_DIRECT_PAIR = "HOPROUTER_REJECT_DIRECT_PAIR"
