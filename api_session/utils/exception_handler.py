from http import HTTPStatus
from typing import Any

from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler


def exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """
    Обработчик ошибок DRF - добавляет машинный code рядом с detail.

    По code клиент отличает session_expired (нужен новый login) от прочих
    отказов. Для Http404/PermissionDenied Django code берется из статуса.
    """
    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {"code": "invalid_params", "detail": response.data}

    elif isinstance(response.data, dict) and "detail" in response.data:
        codes = exc.get_codes() if isinstance(exc, APIException) else None
        response.data["code"] = (
            codes if isinstance(codes, str) else _status_code(response)
        )

    return response


def _status_code(response: Response) -> str:
    return HTTPStatus(response.status_code).phrase.lower().replace(" ", "_")
