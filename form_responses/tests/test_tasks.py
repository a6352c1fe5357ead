from datetime import timedelta
from io import StringIO
from unittest import mock

import pytest
from django.core import mail
from django.core.management import call_command
from django.utils import timezone

from form_responses.models import Response
from form_responses.tasks import (
    delete_expired_responses,
    get_notification_fields,
    send_new_response_notification,
)
from form_responses.tests.factories import ResponseFactory
from uploads.models import File
from uploads.tests.factories import FileFactory


@pytest.mark.django_db
def test_delete_expired_responses_task(form):
    ResponseFactory(form=form, expires_at=timezone.now() - timedelta(seconds=1))
    kept = ResponseFactory(form=form, expires_at=timezone.now() + timedelta(days=1))

    assert delete_expired_responses.delay().get() == 1
    assert list(Response.objects.values_list("id", flat=True)) == [kept.id]


@pytest.mark.django_db
def test_purge_expired_command(form):
    ResponseFactory(form=form, expires_at=timezone.now() - timedelta(seconds=1))
    FileFactory(form=form, expires_at=timezone.now() - timedelta(seconds=1))
    out = StringIO()

    call_command("purge_expired", stdout=out)

    assert "Deleted 1 expired responses" in out.getvalue()
    assert "Deleted 1 expired files" in out.getvalue()
    assert not Response.objects.exists()
    assert not File.objects.exists()


def test_notification_fields_skip_encrypted_and_empty():
    response = Response(data={"name": "Ada", "note": ""})
    assert get_notification_fields(response) == [{"name": "name", "value": "Ada"}]
    assert get_notification_fields(Response(data=None, encrypted=True)) == []


def test_notification_fields_are_markdown_escaped():
    response = Response(data={"first_name": "**Ada**", "age": 36})
    assert get_notification_fields(response) == [
        {"name": r"first\_name", "value": r"\*\*Ada\*\*"},
        {"name": "age", "value": "36"},
    ]


@pytest.mark.django_db
class TestSendNewResponseNotification:
    def test_sends_in_form_locale(self, smtp_settings, form):
        form.notification_emails = ["a@example.com", "b@example.com"]
        form.save()
        response = ResponseFactory(form=form, data={"name": "Ada <script>"})

        result = send_new_response_notification.delay(response.id).get()

        assert result == {"success": True}
        message = mail.outbox[0]
        assert message.to == ["a@example.com", "b@example.com"]
        assert message.subject == f"New response to {form.name}"
        html = message.alternatives[0][0]
        assert "&lt;script&gt;" in html
        assert "<script>" not in html

    def test_submitted_markdown_renders_as_text(self, smtp_settings, form):
        form.notification_emails = ["a@example.com"]
        form.save()
        response = ResponseFactory(
            form=form,
            data={
                "link": "[Reset password](http://evil.example/login)",
                "note": "a | b\nc",
            },
        )

        send_new_response_notification.delay(response.id).get()

        html = mail.outbox[0].alternatives[0][0]
        assert 'href="http://evil.example/login"' not in html
        assert "<td>[Reset password](http://evil.example/login)</td>" in html
        assert "<td>a | b c</td>" in html

    def test_no_recipients(self, smtp_settings, response):
        result = send_new_response_notification.delay(response.id).get()
        assert result == {"success": False, "error": "no_recipients"}
        assert mail.outbox == []

    def test_missing_response(self, db):
        result = send_new_response_notification.delay("res_missing").get()
        assert result["error"] == "response_not_found"

    def test_smtp_failure_is_reported(self, smtp_settings, form):
        form.notification_emails = ["a@example.com"]
        form.save()
        response = ResponseFactory(form=form)

        with mock.patch(
            "notifications.services.EmailMultiAlternatives.send",
            side_effect=ConnectionRefusedError("refused"),
        ):
            result = send_new_response_notification.delay(response.id).get()

        assert result["success"] is False
