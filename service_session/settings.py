import os

from pathlib import Path

import dotenv
from split_settings.tools import include

dotenv.load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("SESSION_SECRET_KEY", "django-insecure-session")
DEBUG = os.environ.get("SESSION_DEBUG", False) == "True"

ALLOWED_HOSTS = os.environ.get(
    "SESSION_ALLOWED_HOSTS",
    "localhost,127.0.0.1",
).split(",")

ROOT_URLCONF = "service_session.urls"

WSGI_APPLICATION = "service_session.wsgi.application"

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

# Components configs
include(
    "components/databases.py",
    "components/installed_apps.py",
    "components/middleware.py",
    "components/auth.py",
    "components/rest_framework.py",
    "components/logging_format.py",
)
