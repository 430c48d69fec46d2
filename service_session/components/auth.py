import os

import dotenv

dotenv.load_dotenv()

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher",
]

# Token
TOKEN_ALGORITHM = os.environ.get("AUTH_TOKEN_ALGORITHM", "HS256")
TOKEN_SECRET = os.environ.get("AUTH_TOKEN_SECRET", "token_sec")
ACCESS_TOKEN_EXP_MIN = int(os.environ.get("AUTH_ACCESS_TOKEN_EXP_MIN", 15))
REFRESH_TOKEN_EXP_DAYS = int(os.environ.get("AUTH_REFRESH_TOKEN_EXP_DAYS", 7))
