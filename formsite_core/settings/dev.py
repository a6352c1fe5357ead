from .base import *

# Development-specific settings
DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

CSRF_TRUSTED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]

# Print outgoing mail instead of relaying it when no SMTP_URL is configured
EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

FIELD_ENCRYPTION_KEY = config(
    "FIELD_ENCRYPTION_KEY", default="dev-only-field-encryption-key",
)

# Run Celery tasks inline so the purge jobs work without a broker
CELERY_TASK_ALWAYS_EAGER = True
