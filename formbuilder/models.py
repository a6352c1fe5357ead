from django.conf import settings
from django.db import models

from accounts.models import Account
from formsite_core.ids import form_id

from .enums import FILE_BLOCK_TYPES

__all__ = ["Form"]


class Form(models.Model):
    id = models.CharField(
        primary_key=True, max_length=40, default=form_id, editable=False,
    )
    account = models.ForeignKey(Account, on_delete=models.CASCADE, related_name="forms")
    name = models.CharField(max_length=200)
    steps = models.JSONField(
        default=list, blank=True, help_text="List of steps, each with a list of blocks",
    )
    retention_days = models.PositiveIntegerField(
        null=True, blank=True, help_text="Days to keep responses; empty keeps them",
    )
    notification_emails = models.JSONField(default=list, blank=True)
    locale = models.CharField(max_length=20, default="en-GB")

    users = models.ManyToManyField(
        settings.AUTH_USER_MODEL, related_name="formsite_forms", blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "forms"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name

    def iter_blocks(self):
        for step in self.steps or []:
            yield from step.get("blocks", [])

    def file_blocks(self):
        return [block for block in self.iter_blocks() if block.get("type") in FILE_BLOCK_TYPES]
