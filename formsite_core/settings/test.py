"""Test-specific settings configuration."""

import tempfile

from .base import *

SECRET_KEY = "test-secret-key"  # nosec B105

FIELD_ENCRYPTION_KEY = "test-field-encryption-key"  # nosec B105

# Use in-memory SQLite for testing speed
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Capture outgoing mail in django.core.mail.outbox
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

SMTP_URL = None
SMTP_SENDER = None

# Account and platform transports hand messages to the locmem backend too
FORMSITE_SMTP_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Keep uploads in memory during tests
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.InMemoryStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
MEDIA_ROOT = tempfile.mkdtemp()

# Faster password hasher for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

# Log to console only during tests
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "level": "ERROR",
            "class": "logging.StreamHandler",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": True,
        },
    },
}
