"""Audit trail recording."""

from formsite_core.utils.logging import ContextLogger

from .models import Event

logger = ContextLogger(__name__)

_MISSING = object()


def get_changes(old_data, new_data):
    """Return ``{"field", "old", "new"}`` entries for every differing key.

    Keys present on only one side are reported with ``None`` on the other.
    """
    old_data = old_data or {}
    new_data = new_data or {}
    changes = []
    for key in sorted(set(old_data) | set(new_data)):
        old = old_data.get(key, _MISSING)
        new = new_data.get(key, _MISSING)
        if old == new:
            continue
        changes.append(
            {
                "field": key,
                "old": None if old is _MISSING else old,
                "new": None if new is _MISSING else new,
            },
        )
    return changes


class EventsService:
    """Persist audit events for account activity."""

    def track_event(
        self,
        event,
        account,
        form=None,
        response=None,
        user=None,
        ip_address=None,
        data=None,
    ):
        if user is not None and not getattr(user, "is_authenticated", False):
            user = None
        record = Event.objects.create(
            event=event,
            account=account,
            form=form,
            response_id=getattr(response, "id", response),
            user=user,
            ip_address=ip_address,
            data=data or {},
        )
        logger.info(
            "Tracked event",
            extra_context={
                "event": str(event),
                "account_id": account.id,
                "response_id": record.response_id,
            },
        )
        return record


events_service = EventsService()
