"""Prefixed, time-sortable identifiers for every model in the project."""

import secrets
import time

from django.db import models


class IdPrefix(models.TextChoices):
    ACCOUNT = "acc", "Account"
    FORM = "form", "Form"
    RESPONSE = "res", "Response"
    FILE = "file", "File"
    NOTE = "note", "Note"
    EVENT = "evt", "Event"


def prefixed(prefix: str) -> str:
    """Return ``<prefix>_<ms timestamp><random>``.

    The timestamp is fixed-width hex so ids compare in creation order.
    """
    millis = int(time.time() * 1000)
    return f"{str(prefix)}_{millis:012x}{secrets.token_hex(5)}"


# Model field defaults; module-level so migrations can reference them.


def account_id() -> str:
    return prefixed(IdPrefix.ACCOUNT)


def form_id() -> str:
    return prefixed(IdPrefix.FORM)


def response_id() -> str:
    return prefixed(IdPrefix.RESPONSE)


def file_id() -> str:
    return prefixed(IdPrefix.FILE)


def note_id() -> str:
    return prefixed(IdPrefix.NOTE)


def event_id() -> str:
    return prefixed(IdPrefix.EVENT)
