from django.db import models
from django.utils import timezone


class DatetimeStampedMixin(models.Model):
    """Mixin - DatetimeStamped."""

    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Время создания сущности",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Время обновления сущности",
    )
    deleted_at = models.DateTimeField(
        default=None,
        null=True,
        help_text="Время удаления сущности (мягкое удаление)",
    )

    def soft_delete(self) -> None:
        """Мягкое удаление сущности."""

        self.deleted_at = timezone.now()
        self.save()

    class Meta:
        abstract = True


class User(DatetimeStampedMixin):
    """Модель - Пользователь."""

    id = models.BigAutoField(
        primary_key=True,
        help_text="Числовой идентификатор (sub в токенах)",
    )
    username = models.CharField(
        max_length=64,
        null=False,
        help_text="Имя пользователя",
    )
    password_hash = models.CharField(
        max_length=128,
        null=False,
        help_text="Пароль (хеш)",
    )

    class Meta:
        db_table = "session_user"
        verbose_name = "Пользователь"
        verbose_name_plural = "Пользователи"
        constraints = [
            models.UniqueConstraint(
                fields=["username"],
                name="unique_active_username",
                condition=models.Q(deleted_at__isnull=True),
                violation_error_message=(
                    "Пользователь с указанным username уже создан"
                ),
            ),
        ]

    def __str__(self) -> str:
        return f"{self.username}(ID={self.id})"
