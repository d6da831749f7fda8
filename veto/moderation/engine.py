"""Multi-layer moderation engine.

Runs the enabled checks in a fixed order and folds their outcomes into a
single :class:`ModerationResult`:

1. Profanity (dictionary matcher)
2. Spam heuristics
3. Toxicity heuristics
4. Personal information (advisory, never blocks by itself)

Only one ``reason`` is reported: each blocking check overwrites the one
before it, so the caller sees the last check that fired.  Every reason is
still kept, in order, in ``reasons``.

With ``auto_clean`` the profanity is censored and the text is approved,
even when other checks fired too.  ``flags`` keeps every check that fired.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, Mapping

from veto.config import ModerationConfig
from veto.moderation.dictionary import DictionaryMatcher, ProfanityDictionary
from veto.moderation.fields import MultiFieldModerator
from veto.moderation.models import (
    FieldModerationResult,
    ModerationFlag,
    ModerationOptions,
    ModerationResult,
    ProfileModerationResult,
)
from veto.moderation.pii import PIIDetector
from veto.moderation.profile import ProfileModerator
from veto.moderation.spam import SpamHeuristic
from veto.moderation.toxicity import ToxicityHeuristic

logger = logging.getLogger(__name__)

PROFANITY_REASON = "Content contains inappropriate language"
PROFANITY_CONFIDENCE = 0.9
PII_SUFFIX = "; also contains personal information"


class ModerationEngine:
    """Deterministic content moderation pipeline.

    Parameters
    ----------
    enabled : bool
        When *False* every call approves immediately (fail-open).
    matcher : DictionaryMatcher | None
        Profanity matcher.  Defaults to a :class:`ProfanityDictionary`.
    spam, toxicity, pii :
        Detector instances; override to plug in test doubles.
    """

    def __init__(
        self,
        enabled: bool = True,
        matcher: DictionaryMatcher | None = None,
        spam: SpamHeuristic | None = None,
        toxicity: ToxicityHeuristic | None = None,
        pii: PIIDetector | None = None,
    ) -> None:
        self._enabled = enabled
        self.matcher = matcher if matcher is not None else ProfanityDictionary()
        self.spam = spam or SpamHeuristic()
        self.toxicity = toxicity or ToxicityHeuristic()
        self.pii = pii or PIIDetector()

    @classmethod
    def from_config(
        cls, config: ModerationConfig, matcher: DictionaryMatcher | None = None
    ) -> ModerationEngine:
        """Build an engine and seed its dictionary from *config*."""
        if matcher is None:
            matcher = ProfanityDictionary(
                custom_words=config.custom_words,
                removed_words=config.removed_words,
            )
        else:
            if config.removed_words:
                matcher.remove_words(*config.removed_words)
            if config.custom_words:
                matcher.add_words(*config.custom_words)
        if not config.enabled:
            logger.info("Content moderation is disabled; all content will be approved")
        return cls(enabled=config.enabled, matcher=matcher)

    # -- public API ----------------------------------------------------------

    def is_enabled(self) -> bool:
        return self._enabled

    def add_custom_words(self, *words: str) -> None:
        self.matcher.add_words(*words)

    def remove_words(self, *words: str) -> None:
        self.matcher.remove_words(*words)

    def moderate_text(
        self, text: str, options: ModerationOptions | None = None, **overrides: bool
    ) -> ModerationResult:
        """Moderate a single piece of text.

        Keyword overrides (``check_spam=False`` and so on) are applied on
        top of *options*, or of the defaults when *options* is omitted.
        """
        if not self._enabled:
            return ModerationResult(approved=True, flags=[], confidence=1.0)

        opts = options or ModerationOptions()
        if overrides:
            opts = dataclasses.replace(opts, **overrides)

        approved = True
        reason: str | None = None
        reasons: list[str] = []
        flags: list[ModerationFlag] = []
        confidence = 1.0
        pii_types: list[str] = []

        # 1. Profanity
        if opts.check_profanity and self.matcher.is_profane(text):
            flags.append(ModerationFlag.PROFANITY)
            approved = False
            reason = PROFANITY_REASON
            reasons.append(reason)
            confidence = min(confidence, PROFANITY_CONFIDENCE)

        # 2. Spam
        if opts.check_spam:
            outcome = self.spam.detect(text)
            if outcome.triggered:
                flags.append(ModerationFlag.SPAM)
                approved = False
                reason = outcome.reason
                reasons.append(outcome.reason or "")
                confidence = min(confidence, outcome.confidence)

        # 3. Toxicity
        if opts.check_toxicity:
            outcome = self.toxicity.detect(text)
            if outcome.triggered:
                flags.append(ModerationFlag.TOXIC)
                approved = False
                reason = outcome.reason
                reasons.append(outcome.reason or "")
                confidence = min(confidence, outcome.confidence)

        # 4. Personal information: warn, never block
        if opts.check_personal_info:
            match = self.pii.detect(text)
            if match.has_pii:
                flags.append(ModerationFlag.PERSONAL_INFO)
                pii_types = list(match.types)
                if not approved:
                    reason = f"{reason}{PII_SUFFIX}"

        # 5. Auto-clean overrides every other signal once profanity is censored
        cleaned_text: str | None = None
        if opts.auto_clean and ModerationFlag.PROFANITY in flags:
            cleaned_text = self.matcher.clean(text)
            approved = True
            reason = None

        logger.debug(
            "Moderation decision approved=%s flags=%s confidence=%.2f",
            approved,
            [f.value for f in flags],
            confidence,
        )

        return ModerationResult(
            approved=approved,
            reason=reason,
            flags=flags,
            confidence=confidence,
            cleaned_text=cleaned_text,
            reasons=reasons,
            pii_types=pii_types,
        )

    def moderate_profile(
        self,
        name: str | None = None,
        bio: str | None = None,
        website: str | None = None,
    ) -> ProfileModerationResult:
        return ProfileModerator(self).moderate_profile(name=name, bio=bio, website=website)

    def moderate_fields(
        self,
        fields: Mapping[str, Any] | Iterable[tuple[str, Any]],
        auto_clean: bool = False,
    ) -> FieldModerationResult:
        return MultiFieldModerator(self).moderate_fields(fields, auto_clean=auto_clean)
