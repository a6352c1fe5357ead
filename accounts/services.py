"""Account lookups used by the other apps."""

from formsite_core.utils.logging import ContextLogger

from .models import Account

logger = ContextLogger(__name__)


class AccountsService:
    """Read access to accounts and their stored SMTP credentials."""

    def find_account(self, account_id):
        return Account.objects.filter(id=account_id).first()

    def find_account_with_credentials(self, account_id):
        """Return the account with decrypted SMTP settings, or ``None``."""
        account = self.find_account(account_id)
        if account is None:
            logger.warning(
                "Account not found", extra_context={"account_id": account_id},
            )
        return account

    def is_member(self, account, user):
        if not user or not user.is_authenticated:
            return False
        if user.is_staff or user.is_superuser:
            return True
        return account.users.filter(pk=user.pk).exists()


accounts_service = AccountsService()
