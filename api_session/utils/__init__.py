from .refresher import TokenRefresher
from .tokenizer import ClaimsCodec, TokenIssuer

__all__ = ["ClaimsCodec", "TokenIssuer", "TokenRefresher"]
