import smtplib

from django.core.management.base import BaseCommand, CommandError

from accounts.services import accounts_service
from notifications.exceptions import TransportError
from notifications.services import email_service


class Command(BaseCommand):
    help = "Send a test email through an SMTP URL or an account's transport"

    def add_arguments(self, parser):
        parser.add_argument("to", help="Recipient address")
        parser.add_argument("--smtp-url", help="SMTP URL to test")
        parser.add_argument("--account-id", help="Use the SMTP settings of this account")
        parser.add_argument("--from", dest="from_email", help="Sender address")

    def handle(self, *args, **options):
        smtp_url = options["smtp_url"]
        from_email = options["from_email"]

        if options["account_id"]:
            account = accounts_service.find_account_with_credentials(options["account_id"])
            if account is None:
                raise CommandError("Account not found")
            credentials = account.get_credentials()
            if not credentials["smtp_url"]:
                raise CommandError("Account has no SMTP settings")
            smtp_url = credentials["smtp_url"]
            from_email = from_email or credentials["smtp_sender"]

        if not smtp_url:
            raise CommandError("Either --smtp-url or --account-id is required")
        if not from_email:
            raise CommandError("A sender is required (--from)")

        try:
            accepted = email_service.send_test_email(smtp_url, from_email, options["to"])
        except TransportError as e:
            raise CommandError(f"Invalid SMTP URL: {e}")
        except (smtplib.SMTPException, OSError) as e:
            raise CommandError(f"Test failed: {e}")

        if not accepted:
            raise CommandError("The server did not accept the message")
        self.stdout.write(self.style.SUCCESS(f"Test email sent to {options['to']}"))
