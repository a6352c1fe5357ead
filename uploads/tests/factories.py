import factory
from factory.django import DjangoModelFactory

from formbuilder.tests.factories import FormFactory
from uploads.models import File


class FileFactory(DjangoModelFactory):
    """Factory for temporary File uploads."""

    class Meta:
        model = File

    form = factory.SubFactory(FormFactory)
    account = factory.SelfAttribute("form.account")
    name = factory.Sequence(lambda n: f"upload-{n}.pdf")
    size = 1024
    type = "application/pdf"
    persistent = False
