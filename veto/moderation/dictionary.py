"""Profanity dictionary used by the moderation engine.

The engine only depends on the :class:`DictionaryMatcher` protocol.  The
default implementation, :class:`ProfanityDictionary`, wraps the
``better_profanity`` word list and keeps it as an immutable snapshot:
readers grab the current snapshot with a single attribute read, writers
build a replacement under a lock and swap it in.  In-flight checks keep
using the snapshot they started with.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Protocol, runtime_checkable

from better_profanity import Profanity

logger = logging.getLogger(__name__)

CENSOR_CHAR = "*"


@runtime_checkable
class DictionaryMatcher(Protocol):
    """Word-list based profanity matcher consumed by the engine."""

    def is_profane(self, text: str) -> bool: ...

    def clean(self, text: str) -> str: ...

    def add_words(self, *words: str) -> None: ...

    def remove_words(self, *words: str) -> None: ...


@dataclass(frozen=True)
class _Snapshot:
    censor: Profanity
    added: frozenset[str]
    removed: frozenset[str]


def _normalize(words: Iterable[str]) -> set[str]:
    return {w.strip().lower() for w in words if w and w.strip()}


def _build_snapshot(added: frozenset[str], removed: frozenset[str]) -> _Snapshot:
    censor = Profanity()
    if removed:
        # whitelisted words are skipped when the default list is loaded
        censor.load_censor_words(whitelist_words=sorted(removed))
    extra = sorted(added - removed)
    if extra:
        censor.add_censor_words(extra)
    return _Snapshot(censor=censor, added=added, removed=removed)


class ProfanityDictionary:
    """Thread-safe, copy-on-write profanity matcher.

    Parameters
    ----------
    custom_words : iterable of str, optional
        Words to recognise in addition to the default list.
    removed_words : iterable of str, optional
        Default-list words that should no longer be recognised.
    """

    def __init__(
        self,
        custom_words: Iterable[str] = (),
        removed_words: Iterable[str] = (),
    ) -> None:
        self._lock = threading.Lock()
        removed = frozenset(_normalize(removed_words))
        added = frozenset(_normalize(custom_words) - removed)
        self._snapshot = _build_snapshot(added, removed)

    # -- reads ---------------------------------------------------------------

    def is_profane(self, text: str) -> bool:
        return self._snapshot.censor.contains_profanity(text)

    def clean(self, text: str) -> str:
        return self._snapshot.censor.censor(text, censor_char=CENSOR_CHAR)

    @property
    def custom_words(self) -> frozenset[str]:
        return self._snapshot.added

    @property
    def removed_words(self) -> frozenset[str]:
        return self._snapshot.removed

    # -- writes --------------------------------------------------------------

    def add_words(self, *words: str) -> None:
        new = _normalize(words)
        if not new:
            return
        with self._lock:
            current = self._snapshot
            self._snapshot = _build_snapshot(
                current.added | new, current.removed - new
            )
        logger.info("Added %d word(s) to the profanity dictionary", len(new))

    def remove_words(self, *words: str) -> None:
        gone = _normalize(words)
        if not gone:
            return
        with self._lock:
            current = self._snapshot
            self._snapshot = _build_snapshot(
                current.added - gone, current.removed | gone
            )
        logger.info("Removed %d word(s) from the profanity dictionary", len(gone))
