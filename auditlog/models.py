from django.conf import settings
from django.db import models

from accounts.models import Account
from formbuilder.models import Form
from formsite_core.ids import event_id

from .enums import EventType

__all__ = ["Event"]


class Event(models.Model):
    id = models.CharField(
        primary_key=True, max_length=40, default=event_id, editable=False,
    )
    event = models.CharField(max_length=50, choices=EventType.choices, db_index=True)
    account = models.ForeignKey(Account, on_delete=models.CASCADE, related_name="events")
    form = models.ForeignKey(
        Form, on_delete=models.SET_NULL, related_name="events", null=True, blank=True,
    )
    # Plain text so the trail outlives purged responses
    response_id = models.CharField(max_length=40, null=True, blank=True, db_index=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
    )
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    data = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "events"
        ordering = ["-id"]

    def __str__(self):
        return f"{self.event} ({self.id})"
