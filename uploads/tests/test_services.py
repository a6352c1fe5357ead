"""Tests for upload storage and the files service."""

from datetime import timedelta

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import InMemoryStorage
from django.utils import timezone

from form_responses.tests.factories import ResponseFactory
from uploads.exceptions import UploadNotFoundError
from uploads.models import File
from uploads.services import FilesService, files_service
from uploads.storage import FileStorage
from uploads.tests.factories import FileFactory


@pytest.fixture
def storage():
    return FileStorage(InMemoryStorage())


@pytest.fixture
def service(storage):
    return FilesService(storage)


def put(storage, path, content=b"data"):
    storage.storage.save(path, ContentFile(content))


@pytest.mark.django_db
class TestFileStorage:
    def test_paths(self, storage):
        file = FileFactory()
        assert storage.get_file_path(file) == f"tmp/{file.id}"
        assert (
            storage.get_file_path(file, persistent=True)
            == f"files/{file.account_id}/{file.id}"
        )

    def test_move(self, storage):
        put(storage, "tmp/a", b"hello")
        storage.move("tmp/a", "files/acc/a")

        assert not storage.exists("tmp/a")
        with storage.storage.open("files/acc/a") as blob:
            assert blob.read() == b"hello"

    def test_move_replaces_destination(self, storage):
        put(storage, "tmp/a", b"new")
        put(storage, "files/acc/a", b"old")
        assert storage.move("tmp/a", "files/acc/a") == "files/acc/a"
        with storage.storage.open("files/acc/a") as blob:
            assert blob.read() == b"new"


@pytest.mark.django_db
class TestFilesService:
    def test_find_files_bulk_strips_ids(self, service):
        first, second = FileFactory(), FileFactory()
        found = service.find_files_bulk([f" {first.id}", f"{second.id} ", "", "file_missing"])
        assert {file.id for file in found} == {first.id, second.id}

    def test_find_files_bulk_for_form_only_matches_unclaimed_uploads(self, service):
        upload = FileFactory()
        form = upload.form
        other_form = FileFactory(account=form.account)
        other_account = FileFactory()
        persistent = FileFactory(form=form, persistent=True)
        claimed = FileFactory(form=form, response=ResponseFactory(form=form))
        ids = [upload.id, other_form.id, other_account.id, persistent.id, claimed.id]

        found = service.find_files_bulk(ids, form=form)

        assert [file.id for file in found] == [upload.id]
        assert len(service.find_files_bulk(ids)) == 5

    def test_update_file_rejects_unknown_fields(self, service):
        file = FileFactory()
        with pytest.raises(ValueError):
            service.update_file(file.id, size=1)

    def test_update_missing_file(self, service):
        with pytest.raises(UploadNotFoundError):
            service.update_file("file_missing", public=True)

    def test_make_persistent(self, service, storage):
        file = FileFactory(expires_at=timezone.now() + timedelta(hours=1))
        response = ResponseFactory(form=file.form)
        put(storage, f"tmp/{file.id}")

        assert service.make_persistent(file, response.id)

        file.refresh_from_db()
        assert file.persistent
        assert file.expires_at is None
        assert file.response_id == response.id
        assert storage.exists(f"files/{file.account_id}/{file.id}")
        assert not storage.exists(f"tmp/{file.id}")

    def test_make_persistent_skips_missing_blob(self, service, storage):
        file = FileFactory()
        response = ResponseFactory(form=file.form)

        assert not service.make_persistent(file, response.id)

        file.refresh_from_db()
        assert not file.persistent
        assert file.response_id is None
        assert not storage.exists(f"files/{file.account_id}/{file.id}")

    def test_delete_expired_files(self, service):
        expired = FileFactory(expires_at=timezone.now() - timedelta(minutes=1))
        kept = FileFactory(expires_at=timezone.now() + timedelta(minutes=1))
        permanent = FileFactory(expires_at=None)

        assert service.delete_expired_files() == 1
        assert not File.objects.filter(id=expired.id).exists()
        assert File.objects.filter(id__in=[kept.id, permanent.id]).count() == 2


@pytest.mark.django_db
def test_deleting_file_removes_blob():
    file = FileFactory()
    path = files_service.storage.get_file_path(file)
    files_service.storage.storage.save(path, ContentFile(b"blob"))

    file.delete()

    assert not files_service.storage.exists(path)
