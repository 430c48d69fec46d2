from django.apps import AppConfig


class ApiSessionConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "api_session"
