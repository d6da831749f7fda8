"""Advisory detection of personal information.

Every probe runs; the result lists each kind of PII found.  Nothing here
blocks content on its own.
"""

from __future__ import annotations

import re

from veto.moderation.models import PIIMatch

_PII_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("email", re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")),
    ("phone", re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")),
    ("credit_card", re.compile(r"\b\d{4}[-\s]?\d{4}[-\s]?\d{4}[-\s]?\d{4}\b")),
    ("ssn", re.compile(r"\b\d{3}-\d{2}-\d{4}\b")),
    (
        "address",
        re.compile(r"\d+\s+[A-Za-z\s]+(?:street|st|avenue|ave|road|rd|drive|dr)\b", re.IGNORECASE),
    ),
]

PII_TYPES: tuple[str, ...] = tuple(label for label, _ in _PII_PATTERNS)


class PIIDetector:
    """Runs every probe and reports each kind of PII found."""

    def detect(self, text: str) -> PIIMatch:
        types = [label for label, pattern in _PII_PATTERNS if pattern.search(text)]
        return PIIMatch(has_pii=bool(types), types=types)
