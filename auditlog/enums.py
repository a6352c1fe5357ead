from django.db import models


class EventType(models.TextChoices):
    RESPONSES_ACCESS = "responses.access", "Response accessed"
    RESPONSES_UPDATE = "responses.update", "Response updated"
    RESPONSES_DELETE = "responses.delete", "Response deleted"
    RESPONSES_UNDELETE = "responses.undelete", "Response restored"
