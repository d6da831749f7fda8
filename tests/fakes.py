"""In-memory test doubles for the moderation engine."""

import re

from veto.moderation.spam import SpamHeuristic


class FakeDictionary:
    """Word-list matcher that records every text it is asked about."""

    def __init__(self, *words: str) -> None:
        self.words = {w.lower() for w in words}
        self.calls: list[str] = []

    def _pattern(self) -> re.Pattern[str] | None:
        if not self.words:
            return None
        alternatives = "|".join(re.escape(w) for w in sorted(self.words))
        return re.compile(rf"\b({alternatives})\b", re.IGNORECASE)

    def is_profane(self, text: str) -> bool:
        self.calls.append(text)
        pattern = self._pattern()
        return bool(pattern and pattern.search(text))

    def clean(self, text: str) -> str:
        pattern = self._pattern()
        return pattern.sub("****", text) if pattern else text

    def add_words(self, *words: str) -> None:
        self.words.update(w.lower() for w in words)

    def remove_words(self, *words: str) -> None:
        self.words.difference_update(w.lower() for w in words)


class BrokenDictionary(FakeDictionary):
    def is_profane(self, text: str) -> bool:
        raise RuntimeError("dictionary unavailable")


class CountingSpam(SpamHeuristic):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def detect(self, text):
        self.calls.append(text)
        return super().detect(text)
