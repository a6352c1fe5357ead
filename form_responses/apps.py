from django.apps import AppConfig


class FormResponsesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "form_responses"
    verbose_name = "Form responses"
