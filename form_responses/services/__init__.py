"""Form responses services package."""

from .responses_service import ResponsesService, delete_expired_responses

__all__ = [
    "ResponsesService",
    "delete_expired_responses",
]
