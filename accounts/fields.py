"""Custom model fields for the accounts app.

This module provides Django model fields that transparently encrypt their
values at rest.
"""

from django.core import checks
from django.db import models

from formsite_core.config import get_config

from .crypto import FERNET_PREFIX, decrypt_value, encrypt_value, fernet_token_length

# UTF-8 bytes per character, worst case
MAX_CHAR_BYTES = 4


class EncryptedCharField(models.CharField):
    """CharField that transparently encrypts and decrypts its value.

    The field behaves exactly like a normal CharField except that its value
    is stored Fernet-encrypted in the database.
    """

    description = "CharField that transparently encrypts and decrypts its values"

    def __init__(self, *args, **kwargs):
        # Ensure max_length is sufficient for encrypted values
        kwargs["max_length"] = max(kwargs.get("max_length", 0), 500)
        self.encryption_enabled = get_config("ENCRYPTION_ENABLED")
        super().__init__(*args, **kwargs)

    def get_internal_type(self):
        return "CharField"

    def db_type_parameters(self, connection):
        # max_length bounds the plaintext; the column holds the token
        params = super().db_type_parameters(connection)
        if self.encryption_enabled and self.max_length:
            params["max_length"] = self.get_column_length()
        return params

    def get_column_length(self):
        return fernet_token_length(self.max_length * MAX_CHAR_BYTES)

    def get_prep_value(self, value):
        value = super().get_prep_value(value)
        if value in (None, "") or not self.encryption_enabled:
            return value
        return encrypt_value(value)

    def from_db_value(self, value, expression, connection):
        if value in (None, "") or not self.encryption_enabled:
            return value
        if not value.startswith(FERNET_PREFIX):
            # Stored before encryption was enabled
            return value
        return decrypt_value(value)

    def check(self, **kwargs):
        errors = super().check(**kwargs)

        if get_config("ENCRYPTION_KEY") is None and self.encryption_enabled:
            errors.append(
                checks.Warning(
                    "EncryptedCharField requires FIELD_ENCRYPTION_KEY to be set "
                    "outside of DEBUG mode",
                    obj=self,
                    id="accounts.W001",
                ),
            )

        return errors
