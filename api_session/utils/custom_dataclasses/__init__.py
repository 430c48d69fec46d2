from .token import TokenInfo, TokenPayload, Tokens

__all__ = ["TokenInfo", "TokenPayload", "Tokens"]
