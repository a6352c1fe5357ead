"""Service layer for uploaded files."""

from django.utils import timezone

from formsite_core.utils.logging import ContextLogger

from .exceptions import UploadNotFoundError
from .models import File
from .storage import FileStorage

logger = ContextLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {"expires_at", "persistent", "public", "response_id", "name", "type"},
)


class FilesService:
    """CRUD helpers for :class:`File` records and their blobs."""

    def __init__(self, storage=None):
        self.storage = storage or FileStorage()

    def find_files_bulk(self, file_ids, form=None):
        """Files with the given ids.

        With ``form``, only unclaimed temporary uploads of that form match.
        """
        ids = [file_id.strip() for file_id in file_ids if file_id and file_id.strip()]
        if not ids:
            return []
        files = File.objects.filter(id__in=ids)
        if form is not None:
            files = files.filter(
                account_id=form.account_id,
                form_id=form.id,
                persistent=False,
                response__isnull=True,
            )
        return list(files.order_by("id"))

    def update_file(self, file_id, **fields):
        """Update the given fields of one file.

        Raises:
            UploadNotFoundError: If no file has ``file_id``
            ValueError: If a field is not updatable
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update file fields: {', '.join(sorted(unknown))}")
        updated = File.objects.filter(id=file_id).update(
            **fields, updated_at=timezone.now(),
        )
        if not updated:
            raise UploadNotFoundError(f"File with ID {file_id} not found")

    def make_persistent(self, file, response_id):
        """Move a temporary upload to permanent storage and attach it.

        Returns False, leaving the record untouched, when the temporary blob
        is missing.
        """
        src = self.storage.get_file_path(file)
        if not self.storage.exists(src):
            logger.warning(
                "Temporary upload missing",
                extra_context={"file_id": file.id, "path": src},
            )
            return False
        self.storage.move(src, self.storage.get_file_path(file, persistent=True))
        self.update_file(
            file.id, expires_at=None, persistent=True, response_id=response_id,
        )
        return True

    def delete_expired_files(self):
        """Delete files whose ``expires_at`` has passed. Blobs go with the rows."""
        deleted, per_model = File.objects.filter(expires_at__lt=timezone.now()).delete()
        count = per_model.get(File._meta.label, 0)
        logger.info("Deleted expired files", extra_context={"count": count})
        return count


files_service = FilesService()
