from .auth import (
    AuthDataInvalidError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .request import AuthHeaderInvalidError, AuthHeaderMissingError
from .token import (
    BadSignatureError,
    InvalidCredentialError,
    MalformedTokenError,
    SessionExpiredError,
    TokenDataInvalidError,
    TokenExpiredError,
)

__all__ = [
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "AuthDataInvalidError",
    "AuthHeaderMissingError",
    "AuthHeaderInvalidError",
    "TokenDataInvalidError",
    "MalformedTokenError",
    "BadSignatureError",
    "TokenExpiredError",
    "InvalidCredentialError",
    "SessionExpiredError",
]
