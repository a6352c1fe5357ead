"""Data access for form responses.

This module handles every persistence operation on responses:
- Creation with retention-based expiry
- Listing with filters and pagination, aggregate counts
- Soft delete/undelete, flag/read/spam updates, purging expired rows
- Linking uploaded files and recording audit events
"""

from datetime import timedelta

from django.db import transaction
from django.db.models import Count, Prefetch
from django.utils import timezone

from auditlog.enums import EventType
from auditlog.services import events_service, get_changes
from formsite_core.config import get_config
from formsite_core.ids import IdPrefix, prefixed
from formsite_core.utils.time import round_time
from uploads.models import File
from uploads.services import files_service

from ..enums import OrderDirection, ResponseFilter
from ..exceptions import ResponseNotFoundError, ValidationError
from ..models import Response
from .base_service import BaseService

# Fields accepted by create_response
CREATE_FIELDS = (
    "account_id",
    "form_id",
    "context",
    "data",
    "data_encrypted",
    "encrypted",
    "encryption_key_hash",
    "error",
    "identity_id",
    "logs",
    "spam",
)

# Fields accepted by update_response
UPDATE_FIELDS = ("data", "data_encrypted", "encrypted", "encryption_key_hash", "labels")

LIST_FIELDS = (
    "created_at",
    "data",
    "data_encrypted",
    "encrypted",
    "encryption_key_hash",
    "flag",
    "form_id",
    "id",
    "labels",
    "spam",
    "read",
    "updated_at",
)

IDENTITY_LIST_FIELDS = ("created_at", "form_id", "flag", "id", "spam", "read")

API_FILE_FIELDS = (
    "id",
    "response_id",
    "encrypted",
    "encrypted_size",
    "encryption_key_hash",
    "name",
    "public",
    "size",
    "type",
)

ORDERABLE_FIELDS = {
    "id": "id",
    "created_at": "created_at",
}


class ResponsesService(BaseService):
    """Service for reading and writing form responses."""

    @property
    def spam_expire_days(self):
        return get_config("SPAM_EXPIRE_DAYS")

    def generate_id(self):
        return prefixed(IdPrefix.RESPONSE)

    def get_expires_at(self, ttl_days):
        """Return the rounded expiry for a retention of ``ttl_days``, or ``None``."""
        if not ttl_days:
            return None
        resolution = timedelta(seconds=get_config("EXPIRY_RESOLUTION_SECONDS"))
        return round_time(timezone.now() + timedelta(days=ttl_days), resolution)

    def get_order_by(self, order_by=None, order_dir=None):
        field = ORDERABLE_FIELDS.get(order_by or "id", "id")
        if order_dir == OrderDirection.ASC:
            return field
        return f"-{field}"

    def count_responses_for_account(self, account_id):
        return Response.objects.filter(account_id=account_id, deleted=False).count()

    def count_responses(self, form_id):
        """Aggregate counts of the non-deleted responses of a form.

        Returns:
        -------
            dict with ``recent`` (non-spam), ``spam``, ``starred``, ``total``
            and ``unread`` (unread and not spam)

        """
        rows = (
            Response.objects.filter(form_id=form_id, deleted=False)
            .values("read", "flag", "spam")
            .annotate(value=Count("id"))
            .order_by()
        )
        total = read = spam = starred = unread_spam = 0
        for row in rows:
            value = row["value"]
            total += value
            if row["read"]:
                read += value
            if row["spam"]:
                spam += value
                if not row["read"]:
                    unread_spam += value
            if row["flag"]:
                starred += value
        return {
            "recent": total - spam,
            "spam": spam,
            "starred": starred,
            "total": total,
            "unread": total - read - unread_spam,
        }

    def create_response(self, data, retention=None):
        """Create a new response.

        Args:
        ----
            data: Dictionary with ``account_id``, ``form_id`` and payload fields;
                an explicit ``id`` is kept
            retention: Optional retention period in days

        Returns:
        -------
            Newly created Response instance

        """
        fields = {key: data[key] for key in CREATE_FIELDS if data.get(key) is not None}
        response = Response.objects.create(
            id=data.get("id") or self.generate_id(),
            expires_at=self.get_expires_at(retention),
            **fields,
        )
        self.logger.info(
            "Response created",
            extra_context={
                "response_id": response.id,
                "form_id": response.form_id,
                "expires_at": response.expires_at,
            },
        )
        return response

    def delete_expired_responses(self):
        """Hard-delete responses whose expiry has passed. Notes and files cascade."""
        _, per_model = Response.objects.filter(expires_at__lt=timezone.now()).delete()
        count = per_model.get(Response._meta.label, 0)
        self.logger.info("Deleted expired responses", extra_context={"count": count})
        return count

    def delete_responses(self, response_ids):
        updated = Response.objects.filter(id__in=list(response_ids)).update(
            deleted=True, deleted_at=timezone.now(),
        )
        self.logger.info("Responses deleted", extra_context={"count": updated})
        return updated

    def undelete_responses(self, response_ids):
        updated = Response.objects.filter(id__in=list(response_ids)).update(
            deleted=False, deleted_at=None,
        )
        self.logger.info("Responses restored", extra_context={"count": updated})
        return updated

    def flag_responses(self, response_ids, flag=None, read=None, spam=None):
        """Update the given flags on a set of responses.

        Marking as spam shortens the expiry to ``SPAM_EXPIRE_DAYS`` from now;
        clearing spam removes the expiry. ``None`` leaves a flag untouched.
        """
        values = {
            name: value
            for name, value in (("flag", flag), ("read", read), ("spam", spam))
            if value is not None
        }
        if spam is True:
            values["expires_at"] = timezone.now() + timedelta(days=self.spam_expire_days)
        elif spam is False:
            values["expires_at"] = None
        if not values:
            return 0
        updated = Response.objects.filter(id__in=list(response_ids)).update(**values)
        self.logger.info(
            "Responses flagged",
            extra_context={"count": updated, "flags": sorted(values)},
        )
        return updated

    def find_response(self, response_id):
        """Return the response with its files, form, account and form members."""
        return (
            Response.objects.select_related("form", "form__account")
            .prefetch_related(
                Prefetch("files", queryset=File.objects.only("id", "response_id")),
                "form__users",
            )
            .filter(id=response_id)
            .first()
        )

    def get_response(self, response_id):
        """Like :meth:`find_response` but raises when missing.

        Raises:
        ------
            ResponseNotFoundError: If response doesn't exist

        """
        response = self.find_response(response_id)
        if response is None:
            self.logger.warning(
                "Response not found", extra_context={"response_id": response_id},
            )
            raise ResponseNotFoundError(f"Response with ID {response_id} not found")
        return response

    def find_response_for_api(self, response_id):
        """Return the response with the metadata of its files."""
        return (
            Response.objects.prefetch_related(
                Prefetch("files", queryset=File.objects.only(*API_FILE_FIELDS)),
            )
            .filter(id=response_id)
            .first()
        )

    def _list(self, queryset, offset, limit, order_by="-id", fields=LIST_FIELDS):
        return list(
            queryset.annotate(notes_count=Count("notes"))
            .order_by(order_by)
            .values(*fields, "notes_count")[offset : offset + limit],
        )

    def list_responses(self, form_id, response_filter=None, limit=25, offset=0):
        """List the non-deleted responses of a form, newest first.

        Args:
        ----
            form_id: Form to list
            response_filter: ``None``/``default`` (non-spam), ``spam``, ``unread``
                (unread, non-spam) or ``starred``
            limit: Maximum number of responses to return
            offset: Offset for pagination

        Raises:
        ------
            ValidationError: If ``response_filter`` is unknown

        """
        queryset = Response.objects.filter(form_id=form_id, deleted=False)
        if response_filter in (None, "", ResponseFilter.DEFAULT):
            queryset = queryset.filter(spam=False)
        elif response_filter == ResponseFilter.SPAM:
            queryset = queryset.filter(spam=True)
        elif response_filter == ResponseFilter.STARRED:
            queryset = queryset.filter(flag=True)
        elif response_filter == ResponseFilter.UNREAD:
            queryset = queryset.filter(read=False, spam=False)
        else:
            raise ValidationError(f"Unknown filter: {response_filter}")
        return self._list(queryset, offset, limit)

    def list_responses_for_account(
        self, account_id, limit=25, offset=0, order_by="id", order_dir="desc",
    ):
        queryset = Response.objects.filter(
            account_id=account_id, deleted=False, spam=False,
        )
        return self._list(
            queryset, offset, limit, order_by=self.get_order_by(order_by, order_dir),
        )

    def list_responses_for_identity(self, identity_id, limit=25, offset=0, account_ids=None):
        """List the non-deleted responses of an identity, newest first.

        ``account_ids`` restricts the result to responses of those accounts.
        """
        queryset = Response.objects.filter(identity_id=identity_id, deleted=False)
        if account_ids is not None:
            queryset = queryset.filter(account_id__in=list(account_ids))
        return list(
            queryset.order_by("-id").values(*IDENTITY_LIST_FIELDS)[offset : offset + limit],
        )

    @transaction.atomic
    def update_response(self, response_id, data, logs=None):
        """Update payload fields and labels, appending ``logs`` to the stored log.

        Raises:
        ------
            ResponseNotFoundError: If response doesn't exist

        """
        try:
            response = Response.objects.select_for_update().get(id=response_id)
        except Response.DoesNotExist:
            raise ResponseNotFoundError(f"Response with ID {response_id} not found")

        update_fields = ["updated_at"]
        for field in UPDATE_FIELDS:
            if field in data:
                setattr(response, field, data[field])
                update_fields.append(field)
        if logs:
            response.logs = [*(response.logs or []), *logs]
            update_fields.append("logs")
        response.updated_at = timezone.now()
        response.save(update_fields=update_fields)
        return response

    def link_files(self, form, response_id, data):
        """Move the files referenced by ``data`` to permanent storage.

        Every file-carrying block of ``form`` whose value is present holds a
        comma-separated list of file ids. Only unclaimed temporary uploads of
        ``form`` are linked; uploads whose blob is gone are skipped.
        """
        data = data or {}
        linked = 0
        for block in form.file_blocks():
            value = data.get(block.get("name"))
            if not value:
                continue
            file_ids = str(value).split(",")
            for file in files_service.find_files_bulk(file_ids, form=form):
                if files_service.make_persistent(file, response_id):
                    linked += 1
        if linked:
            self.logger.info(
                "Linked files",
                extra_context={"response_id": response_id, "count": linked},
            )
        return linked

    def _track(self, event, response, data=None):
        return events_service.track_event(
            event=event,
            account=response.form.account,
            form=response.form,
            response=response,
            user=self.get_request_user(self.request),
            ip_address=self.get_client_ip(self.request),
            data=data,
        )

    def track_access_event(self, response):
        return self._track(EventType.RESPONSES_ACCESS, response)

    def track_delete_event(self, response):
        return self._track(EventType.RESPONSES_DELETE, response)

    def track_undelete_event(self, response):
        return self._track(EventType.RESPONSES_UNDELETE, response)

    def track_update_event(self, response, old_data, new_data):
        return self._track(
            EventType.RESPONSES_UPDATE,
            response,
            data={"changes": get_changes(old_data, new_data)},
        )


# Convenience function used by the purge task and command
def delete_expired_responses():
    """Purge expired responses."""
    return ResponsesService().delete_expired_responses()
