"""Logging utilities for consistent, context-rich logs across the system."""

import logging
from typing import Any


class ContextLogger:
    """Logger wrapper that automatically includes context data in all log entries.

    Usage:
        logger = ContextLogger(__name__)
        logger.set_context(account_id="acc_123", form_id="form_456")
        logger.info("Response created")  # Will include the context automatically

        # To add one-time context for a specific log:
        logger.info("Responses flagged", extra_context={"count": 3})
    """

    def __init__(self, name: str):
        """Initialize with a standard logger name."""
        self.logger = logging.getLogger(name)
        self.context: dict[str, Any] = {}

    def set_context(self, **kwargs) -> None:
        """Set persistent context data for all subsequent log calls."""
        self.context.update(kwargs)

    def clear_context(self, *keys) -> None:
        """Clear specific keys from context, or all if no keys specified."""
        if not keys:
            self.context.clear()
        else:
            for key in keys:
                self.context.pop(key, None)

    def _log(
        self,
        level: int,
        msg: str,
        *args,
        extra_context: dict[str, Any] | None = None,
        **kwargs,
    ) -> None:
        log_context = self.context.copy()
        if extra_context:
            log_context.update(extra_context)

        # Add context to the 'extra' kwarg expected by the standard logger
        kwargs["extra"] = {**(kwargs.get("extra") or {}), "context": log_context}

        self.logger.log(level, msg, *args, **kwargs)

    def debug(
        self, msg: str, *args, extra_context: dict[str, Any] | None = None, **kwargs,
    ) -> None:
        self._log(logging.DEBUG, msg, *args, extra_context=extra_context, **kwargs)

    def info(
        self, msg: str, *args, extra_context: dict[str, Any] | None = None, **kwargs,
    ) -> None:
        self._log(logging.INFO, msg, *args, extra_context=extra_context, **kwargs)

    def warning(
        self, msg: str, *args, extra_context: dict[str, Any] | None = None, **kwargs,
    ) -> None:
        self._log(logging.WARNING, msg, *args, extra_context=extra_context, **kwargs)

    def error(
        self, msg: str, *args, extra_context: dict[str, Any] | None = None, **kwargs,
    ) -> None:
        self._log(logging.ERROR, msg, *args, extra_context=extra_context, **kwargs)

    def exception(
        self, msg: str, *args, extra_context: dict[str, Any] | None = None, **kwargs,
    ) -> None:
        """Log an error message with the current exception's traceback."""
        self._log(
            logging.ERROR,
            msg,
            *args,
            extra_context=extra_context,
            exc_info=True,
            **kwargs,
        )


class ContextFormatter(logging.Formatter):
    """Formatter that appends the ``context`` dict set by :class:`ContextLogger`."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
            message = f"{message} [{pairs}]"
        return message
