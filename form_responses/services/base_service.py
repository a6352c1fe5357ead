"""Base service module with common functionality for form response services."""

from django.conf import settings

from formsite_core.utils.logging import ContextLogger


class BaseService:
    """Base service class carrying request context for logging and auditing."""

    def __init__(self, request=None):
        """Initialize service with optional request context.

        Args:
        ----
            request: Optional Django request object for context logging

        """
        self.logger = ContextLogger(__name__)
        self.request = request

        if request is not None:
            user = getattr(request, "user", None)
            self.logger.set_context(
                user_id=getattr(user, "id", None),
                ip_address=self.get_client_ip(request),
            )

    @staticmethod
    def get_client_ip(request):
        """Get the client IP address from the request.

        Uses X-Forwarded-For only when ``TRUST_X_FORWARDED_FOR`` is set.
        """
        if request is None:
            return None
        if getattr(settings, "TRUST_X_FORWARDED_FOR", False):
            x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
            if x_forwarded_for:
                # Get the first IP in case of multiple proxies
                return x_forwarded_for.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR")

    @staticmethod
    def get_request_user(request):
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            return user
        return None

