from django.apps import AppConfig


class PerfilesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "perfiles"
    verbose_name = "Perfiles de usuario"

    def ready(self):
        from . import signals  # noqa: F401
