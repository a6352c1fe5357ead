import pytest

from accounts.tests.factories import UserFactory
from auditlog.enums import EventType
from auditlog.models import Event
from auditlog.services import events_service, get_changes
from form_responses.tests.factories import ResponseFactory


def test_get_changes():
    old = {"name": "Ada", "email": "ada@example.com", "age": 36}
    new = {"name": "Ada", "email": "ada@example.org", "city": "London"}

    assert get_changes(old, new) == [
        {"field": "age", "old": 36, "new": None},
        {"field": "city", "old": None, "new": "London"},
        {"field": "email", "old": "ada@example.com", "new": "ada@example.org"},
    ]


def test_get_changes_handles_missing_data():
    assert get_changes(None, {"a": 1}) == [{"field": "a", "old": None, "new": 1}]
    assert get_changes({"a": 1}, {"a": 1}) == []


@pytest.mark.django_db
def test_track_event():
    response = ResponseFactory()
    user = UserFactory()

    event = events_service.track_event(
        EventType.RESPONSES_ACCESS,
        account=response.account,
        form=response.form,
        response=response,
        user=user,
        ip_address="203.0.113.7",
    )

    stored = Event.objects.get(id=event.id)
    assert stored.event == "responses.access"
    assert stored.response_id == response.id
    assert stored.user == user
    assert stored.ip_address == "203.0.113.7"
    assert stored.data == {}


@pytest.mark.django_db
def test_track_event_outlives_response():
    response = ResponseFactory()
    event = events_service.track_event(
        EventType.RESPONSES_DELETE, account=response.account, response=response.id,
    )
    response.delete()

    assert Event.objects.get(id=event.id).response_id == event.response_id
