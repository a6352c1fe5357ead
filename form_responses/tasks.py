import smtplib
from urllib.parse import urljoin

from celery import shared_task
from django.conf import settings
from django.urls import reverse

from formsite_core.utils.logging import ContextLogger
from notifications.exceptions import NotificationError
from notifications.services import email_service
from notifications.templates import escape_markdown

from .models import Response
from .services import delete_expired_responses as purge_expired_responses

logger = ContextLogger(__name__)

NEW_RESPONSE_TEMPLATE = "new_response"


def get_notification_fields(response):
    """Markdown-escaped name/value pairs of a plain-text response."""
    if response.encrypted or not isinstance(response.data, dict):
        return []
    return [
        {"name": escape_markdown(name), "value": escape_markdown(value)}
        for name, value in response.data.items()
        if value not in (None, "")
    ]


@shared_task(bind=True)
def send_new_response_notification(self, response_id):
    """Email the form's notification addresses about a new response."""
    logger.clear_context()
    logger.set_context(task_id=self.request.id, response_id=response_id)

    response = Response.objects.select_related("form").filter(id=response_id).first()
    if response is None:
        logger.warning("Response not found")
        return {"success": False, "error": "response_not_found"}

    form = response.form
    recipients = [email for email in form.notification_emails or [] if email]
    if not recipients:
        return {"success": False, "error": "no_recipients"}

    try:
        template = email_service.get_template(NEW_RESPONSE_TEMPLATE, form.locale)
        sent = email_service.send_template(
            template,
            {
                "form_name": form.name,
                "response_id": response.id,
                "fields": get_notification_fields(response),
                "response_url": urljoin(
                    settings.APP_URL,
                    reverse("form_responses:response-detail", args=[response.id]),
                ),
            },
            to=recipients,
            account_id=form.account_id,
        )
    except NotificationError as e:
        logger.error("Cannot render notification", extra_context={"error": str(e)})
        return {"success": False, "error": "template_error"}
    except (smtplib.SMTPException, OSError) as e:
        # Already logged with traceback by the email service
        return {"success": False, "error": str(e)}

    logger.info("New response notification sent", extra_context={"sent": sent})
    return {"success": sent}


@shared_task
def delete_expired_responses():
    """Purge responses past their retention or spam expiry."""
    return purge_expired_responses()
