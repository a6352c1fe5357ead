import factory
from factory.django import DjangoModelFactory

from accounts.tests.factories import AccountFactory
from formbuilder.enums import BlockType
from formbuilder.models import Form


class FormFactory(DjangoModelFactory):
    """Factory for Form model with one text and one file block."""

    class Meta:
        model = Form

    account = factory.SubFactory(AccountFactory)
    name = factory.Sequence(lambda n: f"Form {n}")
    locale = "en-GB"
    retention_days = None
    notification_emails = factory.LazyFunction(list)
    steps = factory.LazyFunction(
        lambda: [
            {
                "blocks": [
                    {"name": "name", "type": BlockType.TEXT_INPUT.value},
                    {"name": "attachment", "type": BlockType.FILE_INPUT.value},
                ],
            },
        ],
    )
