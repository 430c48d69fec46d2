from typing import Any

from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction
from rest_framework import serializers

from .models import User
from .utils.custom_exception import UserAlreadyExistsError


# --- User --- #
class SignUpSerializer(serializers.ModelSerializer):
    """Serializer - регистрация Пользователя."""

    username = serializers.CharField(max_length=64)
    password = serializers.CharField(write_only=True, max_length=128)
    confirm_password = serializers.CharField(write_only=True, max_length=128)

    class Meta:
        model = User
        fields = ["id", "username", "password", "confirm_password"]
        read_only_fields = ["id"]

    @staticmethod
    def validate_username(value: str) -> str:
        """
        Проверка уникальности username среди активных Пользователей.

        :param value:
        :type value: str

        :return:
        :rtype: str
        """
        if User.objects.filter(
            username=value,
            deleted_at__isnull=True,
        ).exists():
            raise UserAlreadyExistsError()

        return value

    def validate(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Доп. валидация параметров:
        - Обе попытки ввода пароля должны быть схожи.

        :param data:
        :type data: dict[str, Any]

        :return:
        :rtype: dict[str, Any]
        """
        if data["password"] != data["confirm_password"]:
            raise serializers.ValidationError("Пароли не совпадают")

        return data

    def create(self, validated_data: dict[str, Any]) -> User:
        """
        Создание Пользователя.

        :param validated_data:
        :type validated_data: dict[str, Any]

        :return:
        :rtype: User
        """
        user = User(
            username=validated_data["username"],
            password_hash=make_password(validated_data["password"]),
        )

        try:
            with transaction.atomic():
                user.save()

        except IntegrityError:
            raise UserAlreadyExistsError()

        return user


# --- Auth --- #
class LoginSerializer(serializers.Serializer):
    """Serializer - авторизация Пользователя."""

    username = serializers.CharField(max_length=64)
    password = serializers.CharField(write_only=True, max_length=128)


class RefreshTokenSerializer(serializers.Serializer):
    """Serializer - query-параметры обновления токенов."""

    refresh_token = serializers.CharField()
