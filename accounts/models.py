from django.conf import settings
from django.db import models

from formsite_core.ids import account_id

from .fields import EncryptedCharField

__all__ = ["Account"]


class Account(models.Model):
    id = models.CharField(
        primary_key=True, max_length=40, default=account_id, editable=False,
    )
    name = models.CharField(max_length=200)

    # Outbound mail; falls back to the platform transport when empty
    smtp_url = EncryptedCharField(max_length=1000, blank=True, default="")
    smtp_sender = models.CharField(max_length=254, blank=True, default="")

    users = models.ManyToManyField(
        settings.AUTH_USER_MODEL, related_name="formsite_accounts", blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "accounts"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.id})"

    @property
    def has_smtp(self):
        return bool(self.smtp_url)

    def get_credentials(self):
        """Return the decrypted SMTP settings for this account."""
        return {
            "smtp_url": self.smtp_url or None,
            "smtp_sender": self.smtp_sender or None,
        }
