"""Veto moderation pipeline.

Dictionary, spam, toxicity and personal-information detectors, the engine
that aggregates them, and the profile / multi-field moderators built on it.
"""

from veto.moderation.dictionary import DictionaryMatcher, ProfanityDictionary
from veto.moderation.engine import ModerationEngine
from veto.moderation.fields import MultiFieldModerator
from veto.moderation.models import (
    DetectionOutcome,
    FieldModerationResult,
    ModerationFlag,
    ModerationOptions,
    ModerationResult,
    PIIMatch,
    ProfileModerationResult,
)
from veto.moderation.pii import PIIDetector
from veto.moderation.profile import ProfileModerator
from veto.moderation.spam import SpamHeuristic
from veto.moderation.toxicity import ToxicityHeuristic

__all__ = [
    "DictionaryMatcher",
    "ProfanityDictionary",
    "ModerationEngine",
    "MultiFieldModerator",
    "ProfileModerator",
    "DetectionOutcome",
    "FieldModerationResult",
    "ModerationFlag",
    "ModerationOptions",
    "ModerationResult",
    "PIIMatch",
    "ProfileModerationResult",
    "PIIDetector",
    "SpamHeuristic",
    "ToxicityHeuristic",
]
