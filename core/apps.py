from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Журнал заправок: модели, сервисы, веб-интерфейс и API."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Fuel log"

    def ready(self):
        from core import signals  # noqa: F401
