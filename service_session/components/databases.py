import os

import dotenv

dotenv.load_dotenv()

# Postgres
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.environ.get("SESSION_POSTGRES_DB", "session_db"),
        "USER": os.environ.get("SESSION_POSTGRES_USER", "session_user"),
        "PASSWORD": os.environ.get("SESSION_POSTGRES_PASSWORD"),
        "HOST": os.environ.get("POSTGRES_HOST", "127.0.0.1"),
        "PORT": int(os.environ.get("POSTGRES_PORT", 5432)),
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
