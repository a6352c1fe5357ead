import pytest

from accounts.services import accounts_service
from accounts.tests.factories import AccountFactory, UserFactory


@pytest.mark.django_db
class TestAccountsService:
    def test_find_account_with_credentials(self):
        account = AccountFactory(
            smtp_url="smtp://mail.example.com", smtp_sender="team@example.com",
        )
        found = accounts_service.find_account_with_credentials(account.id)
        assert found.get_credentials() == {
            "smtp_url": "smtp://mail.example.com",
            "smtp_sender": "team@example.com",
        }

    def test_find_account_with_credentials_missing(self):
        assert accounts_service.find_account_with_credentials("acc_missing") is None

    def test_credentials_empty_values_are_none(self):
        account = AccountFactory()
        assert account.get_credentials() == {"smtp_url": None, "smtp_sender": None}
        assert not account.has_smtp

    def test_is_member(self):
        member = UserFactory()
        outsider = UserFactory()
        staff = UserFactory(is_staff=True)
        account = AccountFactory(users=[member])

        assert accounts_service.is_member(account, member)
        assert not accounts_service.is_member(account, outsider)
        assert accounts_service.is_member(account, staff)
        assert not accounts_service.is_member(account, None)
