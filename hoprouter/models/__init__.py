"""Token descriptor models."""

from hoprouter.models.tokens import (
    CustomToken,
    NativeToken,
    Token,
    TokenKind,
    custom_token,
    native_token,
    parse_token,
    token_kind,
)

__all__ = [
    "CustomToken",
    "NativeToken",
    "Token",
    "TokenKind",
    "custom_token",
    "native_token",
    "parse_token",
    "token_kind",
]
