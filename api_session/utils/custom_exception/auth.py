from rest_framework import status
from rest_framework.exceptions import APIException


class UserNotFoundError(APIException):
    """Обработчик ошибки - Пользователь не найден."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "User not found"
    default_code = "user_not_found_error"


class UserAlreadyExistsError(APIException):
    """Обработчик ошибки - Пользователь с таким username уже существует."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "User already exists"
    default_code = "user_exists"


class AuthDataInvalidError(APIException):
    """Обработчик ошибки - данные для авторизации невалидны."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not valid username or password"
    default_code = "user_login_data_error"
