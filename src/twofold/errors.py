"""Exception hierarchy for twofold."""

from __future__ import annotations


class TwofoldError(Exception):
    """Base exception for all twofold errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidStateError(TwofoldError):
    """A payload was requested from the variant that is not active.

    This signals a programming error: callers are expected to check the state
    (``is_ok()``/``is_error()``) first or use ``unwrap_or``.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.expected = expected
        self.actual = actual


class ConfigurationError(TwofoldError):
    """Configuration validation or resolution failed."""
