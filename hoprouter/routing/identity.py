"""Canonical token identities.

Every token descriptor resolves to a TokenIdentity, and identities are the
only thing the router ever compares. Native coins are keyed by denomination
so that two distinct native assets never collapse into one graph node.
Custom tokens are keyed by contract address; the code hash is not part of
the identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from hoprouter.models.tokens import NativeToken, Token, TokenKind


@dataclass(frozen=True, order=True)
class TokenIdentity:
    """Stable identity of a token, used as a graph node."""

    kind: TokenKind
    key: str

    @classmethod
    def native(cls, denom: str) -> TokenIdentity:
        return cls(TokenKind.NATIVE, denom)

    @classmethod
    def custom(cls, address: str) -> TokenIdentity:
        return cls(TokenKind.CUSTOM, address)

    @property
    def is_native(self) -> bool:
        return self.kind is TokenKind.NATIVE

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.key}"


def token_identity(token: Token) -> TokenIdentity:
    """Resolve a token descriptor to its identity."""
    if isinstance(token, NativeToken):
        return TokenIdentity.native(token.denom)
    return TokenIdentity.custom(token.address)


__all__ = ["TokenIdentity", "token_identity"]
