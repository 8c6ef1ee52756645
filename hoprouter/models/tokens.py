"""Pydantic models for token descriptors.

A token is either the chain's native coin or a custom (contract) token:

    {"native_token": {"denom": "uscrt"}}
    {"custom_token": {"contract_addr": "secret1...", "token_code_hash": "..."}}

Both shapes are closed, immutable and hashable, so descriptors can be used as
dict keys and compared safely. Token *equality* for routing purposes is never
decided on these models directly; see `hoprouter.routing.identity`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeAlias

from pydantic import BaseModel, TypeAdapter

from hoprouter.constants import DEFAULT_NATIVE_DENOM
from hoprouter.models.types import Address, CodeHash, Denom


class TokenKind(str, Enum):
    """Whether a token is the native coin or a contract token."""

    NATIVE = "native"
    CUSTOM = "custom"


class NativeTokenInfo(BaseModel):
    """Body of a native token descriptor."""

    denom: Denom

    model_config = {"frozen": True, "extra": "forbid"}


class CustomTokenInfo(BaseModel):
    """Body of a custom token descriptor."""

    contract_addr: Address
    token_code_hash: CodeHash

    model_config = {"frozen": True, "extra": "forbid"}


class NativeToken(BaseModel):
    """The chain's native coin, identified by its denomination."""

    native_token: NativeTokenInfo

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def kind(self) -> TokenKind:
        return TokenKind.NATIVE

    @property
    def denom(self) -> str:
        return self.native_token.denom

    def to_wire(self) -> dict[str, Any]:
        """Return the descriptor in its wire (JSON) shape."""
        return self.model_dump()


class CustomToken(BaseModel):
    """A contract token, identified by its contract address."""

    custom_token: CustomTokenInfo

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def kind(self) -> TokenKind:
        return TokenKind.CUSTOM

    @property
    def address(self) -> str:
        return self.custom_token.contract_addr

    @property
    def code_hash(self) -> str:
        return self.custom_token.token_code_hash

    def to_wire(self) -> dict[str, Any]:
        """Return the descriptor in its wire (JSON) shape."""
        return self.model_dump()


# Union type for all token descriptors
Token: TypeAlias = NativeToken | CustomToken

_TOKEN_ADAPTER: TypeAdapter[Token] = TypeAdapter(Token)


def native_token(denom: str = DEFAULT_NATIVE_DENOM) -> NativeToken:
    """Build a native token descriptor."""
    return NativeToken(native_token=NativeTokenInfo(denom=denom))


def custom_token(address: str, code_hash: str) -> CustomToken:
    """Build a custom token descriptor."""
    return CustomToken(custom_token=CustomTokenInfo(contract_addr=address, token_code_hash=code_hash))


def parse_token(data: Token | Mapping[str, Any]) -> Token:
    """Validate a token descriptor.

    Args:
        data: A wire-shaped mapping, or an already-parsed descriptor
              (returned unchanged)

    Returns:
        NativeToken or CustomToken

    Raises:
        pydantic.ValidationError: If the mapping matches neither shape
    """
    if isinstance(data, (NativeToken, CustomToken)):
        return data
    return _TOKEN_ADAPTER.validate_python(data)


def token_kind(token: Token) -> TokenKind:
    """Return the kind of a token descriptor."""
    return token.kind


__all__ = [
    "CustomToken",
    "CustomTokenInfo",
    "NativeToken",
    "NativeTokenInfo",
    "Token",
    "TokenKind",
    "custom_token",
    "native_token",
    "parse_token",
    "token_kind",
]
