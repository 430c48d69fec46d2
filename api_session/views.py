import logging

from django.contrib.auth.hashers import check_password
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import User
from .permissions import BearerTokenPermission
from .serializers import (
    LoginSerializer,
    RefreshTokenSerializer,
    SignUpSerializer,
)
from .utils.custom_exception import AuthDataInvalidError, UserNotFoundError
from .utils.mixins import TokenizerWorkMixin

logger = logging.getLogger(__name__)


# --- User --- #
class SignUpView(APIView):
    """View - регистрация Пользователя."""

    serializer_class = SignUpSerializer
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            logger.error(f"SignUp with invalid param: {serializer.errors}")
            raise ValidationError(serializer.errors)

        user = serializer.save()

        return Response(
            {"user_id": str(user.id), "username": user.username},
            status=status.HTTP_201_CREATED,
        )


# --- Auth --- #
class LoginView(APIView, TokenizerWorkMixin):
    """View - авторизация Пользователя."""

    serializer_class = LoginSerializer
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            logger.error(f"Login with invalid param: {serializer.errors}")
            raise ValidationError(serializer.errors)

        user = self._get_user_by_username(
            serializer.validated_data["username"],
        )
        self._check_user_password(user, serializer.validated_data["password"])

        tokens = self._get_token_issuer().issue(user.id)

        # id отдается строкой: JS теряет точность на числах больше 2**53 - 1
        return self._tokens_response(
            tokens,
            user_id=str(user.id),
            username=user.username,
        )

    @staticmethod
    def _get_user_by_username(username: str) -> User:
        try:
            return User.objects.get(username=username, deleted_at__isnull=True)

        except User.DoesNotExist:
            logger.info(f"Login failed, user not found: {username}")
            raise UserNotFoundError()

    @staticmethod
    def _check_user_password(user: User, inc_password: str) -> None:
        if not check_password(inc_password, user.password_hash):
            logger.info(f"Login failed, wrong password: {user}")
            raise AuthDataInvalidError()


class RefreshTokenView(APIView, TokenizerWorkMixin):
    """View - обновление токенов Пользователя."""

    serializer_class = RefreshTokenSerializer
    # DRF проверяет permissions до выбора метода: POST без заголовка
    # получает auth_header_missing, POST с заголовком - 405
    permission_classes = [BearerTokenPermission]

    def get(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.query_params)
        if not serializer.is_valid():
            logger.error(f"Refresh with invalid param: {serializer.errors}")
            raise ValidationError(serializer.errors)

        tokens = self._get_token_refresher().refresh(
            access_token=self._get_bearer_token(request),
            refresh_token=serializer.validated_data["refresh_token"],
        )

        return self._tokens_response(tokens)
