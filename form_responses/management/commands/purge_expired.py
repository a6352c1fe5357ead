from django.core.management.base import BaseCommand

from form_responses.services import delete_expired_responses
from uploads.services import files_service


class Command(BaseCommand):
    help = "Delete expired responses and expired temporary uploads"

    def add_arguments(self, parser):
        parser.add_argument(
            "--skip-files", action="store_true", help="Only purge responses"
        )

    def handle(self, *args, **options):
        responses = delete_expired_responses()
        self.stdout.write(self.style.SUCCESS(f"Deleted {responses} expired responses"))

        if not options["skip_files"]:
            files = files_service.delete_expired_files()
            self.stdout.write(self.style.SUCCESS(f"Deleted {files} expired files"))
