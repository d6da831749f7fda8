"""Profile moderation.

Every supplied field is checked and every failing field is reported; this
never stops at the first problem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlparse

from veto.moderation.models import ProfileModerationResult

if TYPE_CHECKING:
    from veto.moderation.engine import ModerationEngine

INVALID_URL_REASON = "Invalid URL format"

_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


class ProfileModerator:
    def __init__(self, engine: ModerationEngine) -> None:
        self._engine = engine

    def moderate_profile(
        self,
        name: str | None = None,
        bio: str | None = None,
        website: str | None = None,
    ) -> ProfileModerationResult:
        issues: list[str] = []

        if name:
            # Short names trip the capitalization/length spam checks
            result = self._engine.moderate_text(name, check_spam=False)
            if not result.approved:
                issues.append(f"name: {result.reason}")

        if bio:
            result = self._engine.moderate_text(bio)
            if not result.approved:
                issues.append(f"bio: {result.reason}")

        if website and not is_valid_url(website):
            issues.append(f"website: {INVALID_URL_REASON}")

        return ProfileModerationResult(approved=not issues, issues=issues)


def is_valid_url(value: str) -> bool:
    """Syntactic check only: an absolute URL with a scheme.

    Web schemes (http, https, ftp, ws, wss) also need a host; others such as
    ``mailto:`` or ``urn:`` only need the scheme.
    """
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    if parsed.scheme.lower() in _HOST_SCHEMES and not parsed.netloc:
        return False
    if any(ch.isspace() for ch in parsed.netloc):
        return False
    try:
        parsed.port  # raises for non-numeric or out-of-range ports
    except ValueError:
        return False
    return True
