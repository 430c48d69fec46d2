import json
import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from jose import jws, jwt
from jose.exceptions import JWSError
from jose.utils import base64url_decode, base64url_encode

from .custom_dataclasses import TokenInfo, TokenPayload, Tokens
from .custom_enum import TokenType
from .custom_exception import (
    BadSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class ClaimsCodec:
    """
    Utils - подпись payload в токен и обратная проверка токена.

    Секрет и алгоритм передаются в конструктор и после этого не меняются,
    поэтому один экземпляр можно использовать из любого числа потоков.
    """

    header = {"typ": "JWT"}
    segment_pattern = re.compile(r"[A-Za-z0-9_-]+")

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ) -> None:
        if not secret:
            raise ImproperlyConfigured("TOKEN_SECRET must not be empty")

        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock

    @classmethod
    def from_settings(cls, clock: Clock = utc_now) -> "ClaimsCodec":
        return cls(
            secret=settings.TOKEN_SECRET,
            algorithm=settings.TOKEN_ALGORITHM,
            clock=clock,
        )

    def encode(self, payload: TokenPayload) -> str:
        """
        Подпись payload.

        :param payload:
        :type payload: TokenPayload

        :return: JWS compact: header.payload.signature
        :rtype: str
        """
        return jwt.encode(
            claims=payload.to_claims(),
            key=self._secret,
            algorithm=self._algorithm,
            headers=self.header,
        )

    def decode(self, token: str, verify_exp: bool = True) -> TokenPayload:
        """
        Проверка токена и получение его payload.

        Поля payload читаются только после проверки подписи.

        :param token:
        :type token: str
        :param verify_exp: Флаг - отклонять токен с истекшим сроком жизни.
        :type verify_exp: bool

        :return:
        :rtype: TokenPayload
        """
        if not isinstance(token, str) or token.count(".") != 2:
            raise MalformedTokenError()

        if not all(
            self._is_canonical_segment(segment) for segment in token.split(".")
        ):
            raise MalformedTokenError()

        try:
            jws.get_unverified_header(token)

        except (JWSError, ValueError, TypeError):
            raise MalformedTokenError()

        try:
            raw_claims = jws.verify(
                token,
                self._secret,
                algorithms=[self._algorithm],
            )

        except JWSError:
            raise BadSignatureError()

        try:
            claims = json.loads(raw_claims)

        except ValueError:
            raise MalformedTokenError()

        payload = self._payload_from_claims(claims)

        if verify_exp and self._now() >= payload.exp:
            raise TokenExpiredError()

        return payload

    @classmethod
    def _is_canonical_segment(cls, segment: str) -> bool:
        # base64url без padding, биты хвоста нулевые: у токена одна запись
        if not cls.segment_pattern.fullmatch(segment):
            return False

        try:
            decoded = base64url_decode(segment.encode())

        except ValueError:
            return False

        return base64url_encode(decoded).decode() == segment

    def _now(self) -> int:
        return int(self._clock().timestamp())

    @staticmethod
    def _payload_from_claims(claims: Any) -> TokenPayload:
        if not isinstance(claims, dict):
            raise MalformedTokenError()

        try:
            type_ = TokenType(claims["type"])
            sub, iat, exp = claims["sub"], claims["iat"], claims["exp"]

        except (KeyError, ValueError, TypeError):
            raise MalformedTokenError()

        if not (isinstance(sub, str) and sub.isascii() and sub.isdigit()):
            raise MalformedTokenError()

        for timestamp in (iat, exp):
            if isinstance(timestamp, bool) or not isinstance(timestamp, int):
                raise MalformedTokenError()

        return TokenPayload(type=type_, sub=int(sub), iat=iat, exp=exp)


class TokenIssuer:
    """Utils - выпуск пары access/refresh токенов для Пользователя."""

    def __init__(
        self,
        codec: ClaimsCodec,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
        clock: Clock = utc_now,
    ) -> None:
        access_ttl_sec = int(access_ttl.total_seconds())
        refresh_ttl_sec = int(refresh_ttl.total_seconds())
        if not 0 < access_ttl_sec < refresh_ttl_sec:
            raise ImproperlyConfigured(
                "Token TTLs must satisfy 0 < access_ttl < refresh_ttl, "
                f"got access_ttl={access_ttl}, refresh_ttl={refresh_ttl}"
            )

        self._codec = codec
        self._access_ttl = access_ttl_sec
        self._refresh_ttl = refresh_ttl_sec
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        codec: ClaimsCodec | None = None,
        clock: Clock = utc_now,
    ) -> "TokenIssuer":
        return cls(
            codec=codec or ClaimsCodec.from_settings(clock=clock),
            access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXP_MIN),
            refresh_ttl=timedelta(days=settings.REFRESH_TOKEN_EXP_DAYS),
            clock=clock,
        )

    def gen_token(
        self,
        type_: TokenType,
        now_: int,
        ttl: int,
        sub: int,
    ) -> TokenInfo:
        payload = TokenPayload(type=type_, sub=sub, iat=now_, exp=now_ + ttl)

        return TokenInfo(
            type=type_.name,
            ttl=ttl,
            token=self._codec.encode(payload),
            expires_at=payload.exp,
        )

    def issue(self, user_id: int) -> Tokens:
        """
        Выпуск новой пары токенов.

        Оба токена получают один и тот же iat.

        :param user_id:
        :type user_id: int

        :return:
        :rtype: Tokens
        """
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise TypeError(f"user_id must be int, got {type(user_id)}")

        if user_id < 0:
            raise ValueError(f"user_id must be non-negative, got {user_id}")

        now_ = int(self._clock().timestamp())
        tokens = Tokens(
            access_token=self.gen_token(
                type_=TokenType.access,
                now_=now_,
                ttl=self._access_ttl,
                sub=user_id,
            ),
            refresh_token=self.gen_token(
                type_=TokenType.refresh,
                now_=now_,
                ttl=self._refresh_ttl,
                sub=user_id,
            ),
        )
        logger.debug(f"Token pair issued for user_id={user_id}")

        return tokens
