from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        help_text="Время создания сущности",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Время обновления сущности",
                    ),
                ),
                (
                    "deleted_at",
                    models.DateTimeField(
                        default=None,
                        help_text="Время удаления сущности (мягкое удаление)",
                        null=True,
                    ),
                ),
                (
                    "id",
                    models.BigAutoField(
                        help_text="Числовой идентификатор (sub в токенах)",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        help_text="Имя пользователя",
                        max_length=64,
                    ),
                ),
                (
                    "password_hash",
                    models.CharField(
                        help_text="Пароль (хеш)",
                        max_length=128,
                    ),
                ),
            ],
            options={
                "verbose_name": "Пользователь",
                "verbose_name_plural": "Пользователи",
                "db_table": "session_user",
            },
        ),
        migrations.AddConstraint(
            model_name="user",
            constraint=models.UniqueConstraint(
                condition=models.Q(deleted_at__isnull=True),
                fields=("username",),
                name="unique_active_username",
                violation_error_message=(
                    "Пользователь с указанным username уже создан"
                ),
            ),
        ),
    ]
