"""Data models for the content moderation system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ModerationFlag(str, Enum):
    """Tag recorded when a detector fires, whether or not it blocks."""

    PROFANITY = "profanity"
    SPAM = "spam"
    TOXIC = "toxic"
    PERSONAL_INFO = "personal_info"


@dataclass(frozen=True)
class ModerationOptions:
    """Per-call switches for each moderation layer."""

    check_profanity: bool = True
    check_spam: bool = True
    check_toxicity: bool = True
    check_personal_info: bool = True
    auto_clean: bool = False  # replace profanity instead of blocking


@dataclass
class DetectionOutcome:
    """Result of a single heuristic detector."""

    triggered: bool
    reason: str | None = None
    confidence: float = 1.0


@dataclass
class PIIMatch:
    """Result of the personal-information probes."""

    has_pii: bool
    types: list[str] = field(default_factory=list)  # "email" | "phone" | "credit_card" | "ssn" | "address"


@dataclass
class ModerationResult:
    """Aggregated decision for one piece of text."""

    approved: bool
    reason: str | None = None
    flags: list[ModerationFlag] = field(default_factory=list)
    confidence: float = 1.0
    cleaned_text: str | None = None
    reasons: list[str] = field(default_factory=list)
    pii_types: list[str] = field(default_factory=list)

    def has_flag(self, flag: ModerationFlag | str) -> bool:
        return ModerationFlag(flag) in self.flags

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "approved": self.approved,
            "flags": [f.value for f in self.flags],
            "confidence": self.confidence,
        }
        if self.reason is not None:
            data["reason"] = self.reason
        if self.cleaned_text is not None:
            data["cleaned_text"] = self.cleaned_text
        if self.reasons:
            data["reasons"] = list(self.reasons)
        if self.pii_types:
            data["pii_types"] = list(self.pii_types)
        return data


@dataclass
class ProfileModerationResult:
    """Outcome of moderating every field of a user profile."""

    approved: bool
    issues: list[str] = field(default_factory=list)  # "<field>: <reason>"


@dataclass
class FieldModerationResult:
    """Outcome of moderating an ordered set of fields.

    ``failed_field`` names the first failing field; fields after it were never
    evaluated.  ``fields`` holds the values after any auto-cleaning.
    """

    approved: bool
    failed_field: str | None = None
    reason: str | None = None
    flags: list[ModerationFlag] = field(default_factory=list)
    fields: dict[str, Any] = field(default_factory=dict)
