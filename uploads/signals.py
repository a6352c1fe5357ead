from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import File
from .services import files_service


@receiver(post_delete, sender=File)
def delete_file_blob(sender, instance, **kwargs):
    """Remove the stored blob once its record is gone."""
    files_service.storage.delete(files_service.storage.get_file_path(instance))
