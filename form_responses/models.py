from django.conf import settings
from django.db import models

from accounts.models import Account
from formbuilder.models import Form
from formsite_core.ids import note_id, response_id

__all__ = ["Response", "Note"]


class Response(models.Model):
    id = models.CharField(
        primary_key=True, max_length=40, default=response_id, editable=False,
    )
    account = models.ForeignKey(
        Account, on_delete=models.CASCADE, related_name="responses",
    )
    form = models.ForeignKey(Form, on_delete=models.CASCADE, related_name="responses")
    identity_id = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    context = models.JSONField(default=dict, blank=True)

    # Payload: plain JSON, or an opaque ciphertext when encrypted client side
    data = models.JSONField(null=True, blank=True)
    data_encrypted = models.TextField(null=True, blank=True)
    encrypted = models.BooleanField(default=False)
    encryption_key_hash = models.CharField(max_length=128, null=True, blank=True)
    error = models.TextField(null=True, blank=True)

    read = models.BooleanField(default=False)
    flag = models.BooleanField(default=False, help_text="Starred by a user")
    spam = models.BooleanField(default=False)
    deleted = models.BooleanField(default=False)

    labels = models.JSONField(default=list, blank=True)
    logs = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(null=True, blank=True)
    deleted_at = models.DateTimeField(null=True, blank=True)
    expires_at = models.DateTimeField(null=True, blank=True, db_index=True)

    class Meta:
        db_table = "responses"
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["form", "deleted", "spam"], name="responses_form_del_spam_idx"),
            models.Index(fields=["account", "deleted"], name="responses_account_del_idx"),
        ]

    def __str__(self):
        return self.id


class Note(models.Model):
    id = models.CharField(
        primary_key=True, max_length=40, default=note_id, editable=False,
    )
    response = models.ForeignKey(Response, on_delete=models.CASCADE, related_name="notes")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
    )
    text = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "notes"
        ordering = ["id"]

    def __str__(self):
        return f"Note {self.id} on {self.response_id}"
