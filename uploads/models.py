from django.db import models

from accounts.models import Account
from formbuilder.models import Form
from formsite_core.ids import file_id

__all__ = ["File"]


class File(models.Model):
    id = models.CharField(
        primary_key=True, max_length=40, default=file_id, editable=False,
    )
    account = models.ForeignKey(Account, on_delete=models.CASCADE, related_name="files")
    form = models.ForeignKey(
        Form, on_delete=models.CASCADE, related_name="files", null=True, blank=True,
    )
    response = models.ForeignKey(
        "form_responses.Response",
        on_delete=models.CASCADE,
        related_name="files",
        null=True,
        blank=True,
    )
    name = models.CharField(max_length=255)
    size = models.PositiveBigIntegerField(default=0)
    type = models.CharField(max_length=255, default="application/octet-stream")

    encrypted = models.BooleanField(default=False)
    encrypted_size = models.PositiveBigIntegerField(null=True, blank=True)
    encryption_key_hash = models.CharField(max_length=128, null=True, blank=True)

    # Temporary uploads live under tmp/ until a response claims them
    persistent = models.BooleanField(default=False)
    public = models.BooleanField(default=False)
    expires_at = models.DateTimeField(null=True, blank=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "files"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.id})"
