from rest_framework import status
from rest_framework.exceptions import APIException


class AuthHeaderMissingError(APIException):
    """Обработчик ошибки - в запросе нет заголовка Authorization."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Authorization header is missing"
    default_code = "auth_header_missing"


class AuthHeaderInvalidError(APIException):
    """Обработчик ошибки - заголовок Authorization не вида 'Bearer <token>'."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Authorization header must be 'Bearer <token>'"
    default_code = "auth_header_invalid"
