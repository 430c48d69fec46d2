from enum import Enum


class TokenType(Enum):
    """Типы токенов - класс токена входит в подписанный payload."""

    access = "access"
    refresh = "refresh"
