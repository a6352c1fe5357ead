"""Exceptions raised by the uploads app."""


class UploadsError(Exception):
    """Base exception for upload handling."""


class UploadNotFoundError(UploadsError):
    """Raised when a file record does not exist."""
