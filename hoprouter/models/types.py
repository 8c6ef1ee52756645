"""Shared type definitions for token and pair models."""

from typing import Annotated

from pydantic import Field, StringConstraints

# Contract address. Chains differ in address encoding (bech32, hex), so only
# surrounding whitespace and emptiness are rejected.
Address = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Contract code hash (hex digest of the uploaded code)
CodeHash = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
    Field(description="Code hash of the contract"),
]

# Native coin denomination, e.g. "uscrt"
Denom = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
