import logging

from .custom_dataclasses import TokenPayload, Tokens
from .custom_enum import TokenType
from .custom_exception import (
    BadSignatureError,
    InvalidCredentialError,
    MalformedTokenError,
    SessionExpiredError,
    TokenExpiredError,
)
from .tokenizer import ClaimsCodec, Clock, TokenIssuer, utc_now

logger = logging.getLogger(__name__)


class TokenRefresher:
    """
    Utils - выпуск новой пары токенов по паре (access, refresh).

    Ротация без состояния: использованный refresh-токен остается
    действительным до истечения собственного срока жизни. Отзыв
    refresh-токена при использовании потребовал бы хранилища с атомарной
    операцией check-and-invalidate по идентификатору токена.
    """

    def __init__(self, codec: ClaimsCodec, issuer: TokenIssuer) -> None:
        self._codec = codec
        self._issuer = issuer

    @classmethod
    def from_settings(cls, clock: Clock = utc_now) -> "TokenRefresher":
        codec = ClaimsCodec.from_settings(clock=clock)

        return cls(
            codec=codec,
            issuer=TokenIssuer.from_settings(codec=codec, clock=clock),
        )

    def refresh(self, access_token: str, refresh_token: str) -> Tokens:
        """
        Обновление токенов.

        :param access_token: Access-токен, срок жизни может быть истекшим.
        :type access_token: str
        :param refresh_token:
        :type refresh_token: str

        :raises SessionExpiredError: refresh-токен истек, нужен новый login.
        :raises InvalidCredentialError: любая другая причина отказа.

        :return: Новая пара токенов.
        :rtype: Tokens
        """
        refresh_payload = self._decode_refresh_token(refresh_token)
        access_payload = self._decode_access_token(access_token)

        if access_payload.sub != refresh_payload.sub:
            logger.warning(
                "Refresh rejected: access token subject "
                f"{access_payload.sub} does not match refresh token subject "
                f"{refresh_payload.sub}"
            )
            raise InvalidCredentialError()

        return self._issuer.issue(refresh_payload.sub)

    def _decode_refresh_token(self, token: str) -> TokenPayload:
        try:
            payload = self._codec.decode(token)

        except TokenExpiredError:
            logger.info("Refresh rejected: refresh token expired")
            raise SessionExpiredError()

        except BadSignatureError:
            logger.warning("Refresh rejected: refresh token signature mismatch")
            raise InvalidCredentialError()

        except MalformedTokenError:
            logger.info("Refresh rejected: malformed refresh token")
            raise InvalidCredentialError()

        if payload.type is not TokenType.refresh:
            logger.warning(
                f"Refresh rejected: {payload.type.name} token presented "
                "as refresh token"
            )
            raise InvalidCredentialError()

        return payload

    def _decode_access_token(self, token: str) -> TokenPayload:
        try:
            payload = self._codec.decode(token, verify_exp=False)

        except BadSignatureError:
            logger.warning("Refresh rejected: access token signature mismatch")
            raise InvalidCredentialError()

        except MalformedTokenError:
            logger.info("Refresh rejected: malformed access token")
            raise InvalidCredentialError()

        if payload.type is not TokenType.access:
            logger.warning(
                f"Refresh rejected: {payload.type.name} token presented "
                "as access token"
            )
            raise InvalidCredentialError()

        return payload
