"""Email service: SMTP transports per account and localized templates."""

import smtplib
from pathlib import Path

from django.conf import settings
from django.core.mail import EmailMessage, EmailMultiAlternatives

from accounts.services import accounts_service
from formsite_core.cache import generate_cache_key, get_cache
from formsite_core.config import get_config
from formsite_core.utils.logging import ContextLogger

from .exceptions import TemplateNotFoundError
from .templates import compile_template, render_template
from .transport import Transport

logger = ContextLogger(__name__)

# Template header keys mapped to send() arguments
ATTRIBUTE_ARGUMENTS = {
    "from": "from_email",
    "subject": "subject",
    "text": "text",
    "to": "to",
}

TEST_EMAIL_SUBJECT = "Test email"
TEST_EMAIL_TEXT = "This is a test email from Formsite."


class EmailService:
    """Sends email through the platform transport or an account's own SMTP server."""

    def __init__(self):
        self.templates = {}

    @property
    def default_transport(self):
        """Transport configured by ``SMTP_URL``/``SMTP_SENDER``, or ``None``."""
        smtp_url = getattr(settings, "SMTP_URL", None)
        if not smtp_url:
            return None
        return Transport.from_url(smtp_url, sender=getattr(settings, "SMTP_SENDER", None))

    @property
    def transports(self):
        return get_cache(get_config("TRANSPORT_CACHE_ALIAS"))

    def _transport_cache_key(self, account_id):
        return generate_cache_key("email_transport", account_id)

    def get_transport_for_account(self, account_id):
        """Return the cached transport of an account.

        Falls back to the default transport when the account has no SMTP
        settings of its own. Returns ``None`` when neither exists.
        """
        key = self._transport_cache_key(account_id)
        transport = self.transports.get(key)
        if transport is not None:
            return transport

        account = accounts_service.find_account_with_credentials(account_id)
        credentials = account.get_credentials() if account else {}
        if credentials.get("smtp_url"):
            transport = Transport.from_url(
                credentials["smtp_url"], sender=credentials.get("smtp_sender"),
            )
        else:
            transport = self.default_transport

        if transport is not None:
            self.transports.set(key, transport)
        return transport

    def invalidate_transport(self, account_id):
        self.transports.delete(self._transport_cache_key(account_id))

    def get_template(self, name, locale=None):
        """Return the template ``name`` in ``locale`` or the default locale.

        Raises:
            TemplateNotFoundError: If the template or both locales are missing
        """
        default_locale = get_config("DEFAULT_LOCALE")
        locales = self.templates.get(name)
        if not locales:
            raise TemplateNotFoundError(f"Email template {name} not found.")
        template = locales.get(locale or default_locale) or locales.get(default_locale)
        if template is None:
            logger.warning(
                "Email template locale not found",
                extra_context={"template": name, "locale": locale},
            )
            raise TemplateNotFoundError(
                f"Email template {name} with locale {locale} not found.",
            )
        return template

    def compile_templates(self, directory=None, pattern="**/*.md"):
        """Compile every ``<name>.<locale>.md`` file below ``directory``.

        Returns the number of templates compiled.
        """
        base = Path(directory or settings.EMAIL_TEMPLATES_DIR)
        count = 0
        for path in sorted(base.glob(pattern)):
            name, locale, *_ = [*path.stem.split("."), None]
            locale = locale or get_config("DEFAULT_LOCALE")
            self.templates.setdefault(name, {})[locale] = compile_template(
                path.read_text(encoding="utf-8"),
            )
            count += 1
        logger.debug(
            "Compiled email templates",
            extra_context={"directory": str(base), "count": count},
        )
        return count

    def send(
        self,
        to,
        subject=None,
        text=None,
        html=None,
        from_email=None,
        account_id=None,
        attachments=None,
    ):
        """Send one message.

        Args:
            to: Recipient address or list of addresses
            subject: Subject line
            text: Plain text body
            html: HTML body, sent as an alternative part
            from_email: Sender; defaults to the transport's sender
            account_id: Send through this account's transport instead of the
                default one
            attachments: List of dicts with ``content`` (bytes, str or a
                file-like object), ``content_type`` and ``filename``

        Returns:
            True if at least one message was accepted, False otherwise
        """
        if account_id:
            transport = self.get_transport_for_account(account_id)
        else:
            transport = self.default_transport
        if transport is None:
            logger.warning(
                "No email transport configured", extra_context={"account_id": account_id},
            )
            return False

        message = EmailMultiAlternatives(
            subject=subject or "",
            body=text or "",
            from_email=from_email or transport.sender,
            to=[to] if isinstance(to, str) else list(to),
            connection=transport.get_connection(),
        )
        if html:
            message.attach_alternative(html, "text/html")
        for attachment in attachments or []:
            content = attachment["content"]
            if hasattr(content, "read"):
                content = content.read()
            message.attach(attachment["filename"], content, attachment.get("content_type"))

        try:
            sent = message.send()
        except (smtplib.SMTPException, OSError):
            logger.exception(
                "Failed to send email",
                extra_context={"account_id": account_id, "host": transport.host},
            )
            raise
        return sent > 0

    def send_template(self, tpl, variables, **options):
        """Render ``tpl`` and send it; keyword options override template headers."""
        rendered = render_template(tpl, variables)
        params = {
            ATTRIBUTE_ARGUMENTS[key]: value
            for key, value in rendered.attributes.items()
            if key in ATTRIBUTE_ARGUMENTS
        }
        params.update({key: value for key, value in options.items() if value is not None})
        params["html"] = rendered.html
        return self.send(**params)

    def send_test_email(self, smtp_url, from_email, to):
        """Send a fixed plain-text message through a one-off transport."""
        transport = Transport.from_url(smtp_url, sender=from_email)
        message = EmailMessage(
            subject=TEST_EMAIL_SUBJECT,
            body=TEST_EMAIL_TEXT,
            from_email=from_email,
            to=[to],
            connection=transport.get_connection(),
        )
        return message.send() > 0


email_service = EmailService()
