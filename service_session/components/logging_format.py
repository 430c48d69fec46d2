import os
import sys


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{levelname}] {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "verbose",
        },
    },
    "loggers": {
        # Django
        "django": {
            "handlers": ["console"],
            "level": os.environ.get("SESSION_DJANGO_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
        # Session tokens
        "api_session": {
            "handlers": ["console"],
            "level": os.environ.get("SESSION_LOG_LEVEL", "DEBUG"),
            "propagate": True,
        },
    },
}
