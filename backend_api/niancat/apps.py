from django.apps import AppConfig


class NiancatConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "niancat"
    verbose_name = "Niancat"
