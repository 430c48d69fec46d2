import logging

from rest_framework.request import Request
from rest_framework.response import Response

from .custom_dataclasses import Tokens
from .custom_exception import AuthHeaderInvalidError, AuthHeaderMissingError
from .refresher import TokenRefresher
from .tokenizer import TokenIssuer

logger = logging.getLogger(__name__)


class TokenizerWorkMixin:
    """Work - mixin по работе с токенами в View/Permission."""

    auth_scheme = "Bearer"

    @classmethod
    def _get_bearer_token(cls, request: Request) -> str:
        """
        Получение токена из заголовка 'Authorization: Bearer <token>'.

        :param request:
        :type request: Request

        :raises AuthHeaderMissingError:
        :raises AuthHeaderInvalidError:

        :return:
        :rtype: str
        """
        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header:
            raise AuthHeaderMissingError()

        parts = auth_header.split(" ", 1)
        if not (
            len(parts) == 2 and
            parts[0] == cls.auth_scheme and
            parts[1] and
            not any(symbol.isspace() for symbol in parts[1])
        ):
            logger.info("Authorization header has wrong format")
            raise AuthHeaderInvalidError()

        return parts[1]

    @staticmethod
    def _get_token_issuer() -> TokenIssuer:
        return TokenIssuer.from_settings()

    @staticmethod
    def _get_token_refresher() -> TokenRefresher:
        return TokenRefresher.from_settings()

    @staticmethod
    def _tokens_response(tokens: Tokens, **extra: str) -> Response:
        """
        Ответ с парой токенов.

        :param tokens:
        :type tokens: Tokens
        :param extra: Доп. поля ответа.
        :type extra: str

        :return:
        :rtype: Response
        """
        return Response(
            {
                **extra,
                "access_token": tokens.access_token.token,
                "refresh_token": tokens.refresh_token.token,
            }
        )
