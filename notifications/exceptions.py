"""
Custom exceptions for the notifications app.
"""


class NotificationError(Exception):
    """Base exception for all errors in the notifications app."""


class TemplateNotFoundError(NotificationError):
    """Raised when an email template or all of its locales are missing."""


class TransportError(NotificationError):
    """Raised for a malformed SMTP connection URL."""
