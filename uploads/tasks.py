from celery import shared_task

from .services import files_service


@shared_task
def delete_expired_files():
    """Purge temporary uploads that were never attached to a response."""
    return files_service.delete_expired_files()
