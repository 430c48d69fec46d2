from rest_framework import status
from rest_framework.exceptions import APIException


class TokenDataInvalidError(APIException):
    """Обработчик ошибки - данные токена невалидны."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid token, please login again"
    default_code = "token_error"


class MalformedTokenError(TokenDataInvalidError):
    """Обработчик ошибки - строка не является токеном."""

    default_detail = "Malformed token"
    default_code = "token_malformed"


class BadSignatureError(TokenDataInvalidError):
    """Обработчик ошибки - подпись токена не совпадает с payload."""

    default_detail = "Token signature mismatch"
    default_code = "token_bad_signature"


class TokenExpiredError(TokenDataInvalidError):
    """Обработчик ошибки - срок жизни токена истек."""

    default_detail = "Token expired"
    default_code = "token_expired"


class InvalidCredentialError(APIException):
    """Обработчик ошибки - пара токенов отклонена при обновлении."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credential"
    default_code = "invalid_credential"


class SessionExpiredError(APIException):
    """Обработчик ошибки - refresh-токен истек, требуется новый login."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Session expired, please login again"
    default_code = "session_expired"
