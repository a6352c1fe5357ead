from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from accounts.models import Account

from .services import email_service


@receiver(post_save, sender=Account)
@receiver(post_delete, sender=Account)
def invalidate_account_transport(sender, instance, **kwargs):
    """Drop the cached transport when an account's SMTP settings may have changed."""
    email_service.invalidate_transport(instance.id)
