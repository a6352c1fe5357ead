"""
Custom exceptions for the form responses app.
"""


class ResponsesError(Exception):
    """Base exception for all errors in the form responses app."""


class ResponseNotFoundError(ResponsesError):
    """Raised when a response is not found."""


class FormNotFoundError(ResponsesError):
    """Raised when the form a response belongs to is not found."""


class ValidationError(ResponsesError):
    """Raised when submitted data or query options are invalid."""
