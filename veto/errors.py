"""Exception types raised by the moderation gate and configuration layer."""

from __future__ import annotations

from typing import Any


class VetoError(Exception):
    """Base class for all errors raised by veto."""


class ConfigError(VetoError):
    """Raised when a configuration file cannot be parsed or is invalid."""


class ValidationError(VetoError):
    """A submitted field is missing, empty, not a string, or too long."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": "ValidationError", "message": self.message}


class ModerationError(VetoError):
    """Content was rejected by moderation.

    Carries the human-readable ``reason`` and the ``flags`` that fired so
    the integration layer can report them back to the submitter.
    """

    def __init__(
        self,
        reason: str,
        flags: list[str] | None = None,
        field: str | None = None,
        issues: list[str] | None = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.flags = list(flags or [])
        self.field = field
        self.issues = list(issues or [])

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"error": "ModerationError", "message": self.reason}
        if self.flags:
            data["flags"] = list(self.flags)
        if self.field is not None:
            data["field"] = self.field
        if self.issues:
            data["issues"] = list(self.issues)
        return data
