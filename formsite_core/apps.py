from django.apps import AppConfig


class FormsiteCoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "formsite_core"
    verbose_name = "Formsite Core"
