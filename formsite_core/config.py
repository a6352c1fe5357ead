"""
Configuration settings for the formsite apps.

This module centralizes the tunables used by the service layer, pulling values
from environment variables with sensible defaults.
"""

import os

from django.conf import settings

# Default values - will be overridden by environment variables if set
DEFAULT_CONFIG = {
    # Responses
    "SPAM_EXPIRE_DAYS": 14,
    "EXPIRY_RESOLUTION_SECONDS": 60,
    "LIST_LIMIT_DEFAULT": 25,
    "LIST_LIMIT_MAX": 100,
    # Email
    "DEFAULT_LOCALE": "en-GB",
    "SMTP_GREETING_TIMEOUT": 6,  # seconds
    "TRANSPORT_CACHE_ALIAS": "email_transports",
    "SMTP_BACKEND": "django.core.mail.backends.smtp.EmailBackend",
    # Security settings
    "ENCRYPTION_ENABLED": True,
    "ENCRYPTION_KEY": None,  # Must be set in environment
    "ENCRYPTION_SALT": None,  # Derived from SECRET_KEY when unset
}


def get_config(key, default=None):
    """
    Get a configuration value from environment variables or settings with fallback.

    Args:
        key: The configuration key to look up
        default: Default value if not found

    Returns:
        The configuration value
    """
    # Bridge the app's config with the main project settings.
    if key == "ENCRYPTION_KEY" and getattr(settings, "FIELD_ENCRYPTION_KEY", None):
        return settings.FIELD_ENCRYPTION_KEY

    if default is None:
        default = DEFAULT_CONFIG.get(key)

    # Check if the key exists in the environment with FORMSITE_ prefix
    env_key = f"FORMSITE_{key}"
    if env_key in os.environ:
        value = os.environ[env_key]

        # Try to convert value to appropriate type based on default
        if isinstance(default, bool):
            return value.lower() in ("true", "yes", "1")
        elif isinstance(default, int):
            try:
                return int(value)
            except (ValueError, TypeError):
                return default
        elif isinstance(default, float):
            try:
                return float(value)
            except (ValueError, TypeError):
                return default
        return value

    # Check if the key exists in Django settings
    if hasattr(settings, env_key):
        return getattr(settings, env_key)

    return default
