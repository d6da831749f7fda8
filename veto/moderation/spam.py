"""Rule-based spam detection.

Checks are evaluated in a fixed priority order and the first one that
matches decides the outcome:

1. Excessive capitalization (only for text longer than 20 characters)
2. A single character repeated six or more times in a row
3. More than 20 emoticons
4. More than 5 links
5. Known promotional phrases
"""

from __future__ import annotations

import re

from veto.moderation.models import DetectionOutcome

# ---------------------------------------------------------------------------
# Thresholds / patterns
# ---------------------------------------------------------------------------

CAPS_RATIO_THRESHOLD = 0.7
CAPS_MIN_LENGTH = 20
MAX_EMOJIS = 20
MAX_LINKS = 5

_UPPERCASE_RE = re.compile(r"[A-Z]")
_REPEATED_CHAR_RE = re.compile(r"(.)\1{5,}")
_EMOJI_RE = re.compile("[\U0001F600-\U0001F64F]")
_URL_RE = re.compile(r"https?://[^\s]+", re.IGNORECASE)

SPAM_PHRASES: tuple[str, ...] = (
    "click here now",
    "limited time offer",
    "act now",
    "free money",
    "work from home",
    "make money fast",
    "buy now",
    "subscribe to my channel",
)


class SpamHeuristic:
    """Stateless spam detector; safe to share between threads."""

    def __init__(self, phrases: tuple[str, ...] | list[str] = SPAM_PHRASES) -> None:
        self._phrases = tuple(p.lower() for p in phrases)

    def detect(self, text: str) -> DetectionOutcome:
        if self._is_shouting(text):
            return DetectionOutcome(True, "Excessive capitalization detected", 0.8)

        if _REPEATED_CHAR_RE.search(text):
            return DetectionOutcome(True, "Excessive repeated characters", 0.85)

        if len(_EMOJI_RE.findall(text)) > MAX_EMOJIS:
            return DetectionOutcome(True, "Excessive emojis", 0.75)

        if len(_URL_RE.findall(text)) > MAX_LINKS:
            return DetectionOutcome(True, "Excessive links detected", 0.9)

        lower = text.lower()
        if any(phrase in lower for phrase in self._phrases):
            return DetectionOutcome(True, "Suspected promotional content", 0.7)

        return DetectionOutcome(False)

    @staticmethod
    def _is_shouting(text: str) -> bool:
        if len(text) <= CAPS_MIN_LENGTH:
            return False
        ratio = len(_UPPERCASE_RE.findall(text)) / len(text)
        return ratio > CAPS_RATIO_THRESHOLD
