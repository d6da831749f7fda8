"""Regex-based hate-speech and harassment detection."""

from __future__ import annotations

import re

from veto.moderation.models import DetectionOutcome

_HATE_SPEECH_PATTERNS: list[re.Pattern[str]] = [
    re.compile(p, re.IGNORECASE)
    for p in [
        r"\b(hate|kill|die|kys)\s+(you|them|everyone)\b",
        r"\byou\s+(should|must|need to)\s+die\b",
    ]
]

HARASSMENT_WORDS: tuple[str, ...] = ("idiot", "stupid", "loser", "pathetic", "worthless")

# Distinct insults needed before text counts as harassment
_HARASSMENT_THRESHOLD = 2


class ToxicityHeuristic:
    """Threat patterns take priority over the insult-word count."""

    def __init__(self, harassment_words: tuple[str, ...] | list[str] = HARASSMENT_WORDS) -> None:
        # dict.fromkeys keeps order and drops duplicates so each word counts once
        self._harassment_words = tuple(dict.fromkeys(w.lower() for w in harassment_words))

    def detect(self, text: str) -> DetectionOutcome:
        for pattern in _HATE_SPEECH_PATTERNS:
            if pattern.search(text):
                return DetectionOutcome(
                    True, "Content may contain threatening or hateful language", 0.85
                )

        lower = text.lower()
        hits = sum(1 for word in self._harassment_words if word in lower)
        if hits >= _HARASSMENT_THRESHOLD:
            return DetectionOutcome(True, "Content may be harassing or insulting", 0.75)

        return DetectionOutcome(False)
