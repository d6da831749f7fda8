"""Tests for the spam heuristic."""

from veto.moderation.spam import SpamHeuristic


def _detect(text: str):
    return SpamHeuristic().detect(text)


def test_plain_text_is_not_spam():
    outcome = _detect("Had a lovely walk in the park this morning.")
    assert not outcome.triggered
    assert outcome.confidence == 1.0
    assert outcome.reason is None


def test_empty_text_is_not_spam():
    assert not _detect("").triggered


def test_short_all_caps_is_not_shouting():
    outcome = _detect("ABCDEFGHIJ")
    assert not outcome.triggered


def test_caps_at_exactly_twenty_characters_is_not_shouting():
    assert not _detect("ABCDEFGHIJKLMNOPQRST").triggered


def test_long_mostly_caps_is_shouting():
    text = "ABCDEFGHIJKLMNOPQRSTUVW" + "ab"
    assert len(text) == 25
    outcome = _detect(text)
    assert outcome.triggered
    assert outcome.reason == "Excessive capitalization detected"
    assert outcome.confidence == 0.8


def test_repeated_characters():
    outcome = _detect("this is sooooooo good")
    assert outcome.triggered
    assert outcome.reason == "Excessive repeated characters"
    assert outcome.confidence == 0.85


def test_five_repeats_are_allowed():
    assert not _detect("wow!!!!! nice").triggered


def test_excessive_emojis():
    text = "".join(chr(0x1F600 + i) for i in range(21))
    outcome = _detect(text)
    assert outcome.triggered
    assert outcome.reason == "Excessive emojis"
    assert outcome.confidence == 0.75


def test_twenty_emojis_are_allowed():
    text = "".join(chr(0x1F600 + i) for i in range(20))
    assert not _detect(text).triggered


def test_excessive_links():
    text = " ".join(f"https://example.com/{i}" for i in range(6))
    outcome = _detect(text)
    assert outcome.triggered
    assert outcome.reason == "Excessive links detected"
    assert outcome.confidence == 0.9


def test_five_links_are_allowed():
    text = " ".join(f"http://example.com/{i}" for i in range(5))
    assert not _detect(text).triggered


def test_promotional_phrase_is_case_insensitive():
    outcome = _detect("Limited Time Offer on running shoes")
    assert outcome.triggered
    assert outcome.reason == "Suspected promotional content"
    assert outcome.confidence == 0.7


def test_first_matching_check_wins():
    # Shouting and a promotional phrase: capitalization is checked first
    outcome = _detect("BUY NOW BEFORE IT IS TOO LATE FRIENDS")
    assert outcome.reason == "Excessive capitalization detected"


def test_custom_phrase_list():
    detector = SpamHeuristic(phrases=["Join My Server"])
    assert detector.detect("please join my server today").triggered
    assert not detector.detect("buy now").triggered
