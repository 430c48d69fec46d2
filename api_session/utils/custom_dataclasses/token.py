from dataclasses import asdict, dataclass
from typing import Any

from ..custom_enum import TokenType


@dataclass(frozen=True)
class TokenPayload:
    """Модель данных - payload формируемого токена."""

    type: TokenType
    sub: int
    iat: int
    exp: int

    def to_claims(self) -> dict[str, Any]:
        """Payload в виде JWT claims (sub по RFC 7519 - строка)."""

        claims = asdict(self)
        claims["type"] = self.type.value
        claims["sub"] = str(self.sub)

        return claims


@dataclass(frozen=True)
class TokenInfo:
    """Модель данных - token + meta-информация по нему."""

    type: str
    ttl: int
    token: str
    expires_at: int


@dataclass(frozen=True)
class Tokens:
    """Модель данных - пара token-ов, выданная за один раз."""

    access_token: TokenInfo
    refresh_token: TokenInfo
