"""Path layout and blob operations for uploaded files."""

from django.core.files.storage import Storage, default_storage

from formsite_core.utils.logging import ContextLogger

logger = ContextLogger(__name__)

TEMPORARY_DIR = "tmp"
PERSISTENT_DIR = "files"


class FileStorage:
    """Thin layer over a Django storage backend.

    Temporary uploads are kept at ``tmp/<id>``; once attached to a response
    they move to ``files/<account_id>/<id>``.
    """

    def __init__(self, storage: Storage | None = None):
        self._storage = storage

    @property
    def storage(self) -> Storage:
        # Resolved lazily so STORAGES overrides in tests take effect
        return self._storage or default_storage

    def get_file_path(self, file, persistent=None):
        if persistent is None:
            persistent = file.persistent
        if persistent:
            return f"{PERSISTENT_DIR}/{file.account_id}/{file.id}"
        return f"{TEMPORARY_DIR}/{file.id}"

    def exists(self, path):
        return self.storage.exists(path)

    def move(self, src, dst):
        """Move a blob from ``src`` to ``dst``; a no-op when they are equal."""
        if src == dst:
            return dst
        if self.storage.exists(dst):
            self.storage.delete(dst)
        with self.storage.open(src, "rb") as source:
            saved = self.storage.save(dst, source)
        self.storage.delete(src)
        logger.debug("Moved file", extra_context={"src": src, "dst": saved})
        return saved

    def delete(self, path):
        if self.storage.exists(path):
            self.storage.delete(path)
