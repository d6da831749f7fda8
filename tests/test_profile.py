"""Tests for profile moderation."""

from tests.fakes import FakeDictionary
from veto.moderation.engine import ModerationEngine
from veto.moderation.profile import ProfileModerator, is_valid_url


def _moderator() -> ProfileModerator:
    return ProfileModerator(ModerationEngine(matcher=FakeDictionary("heck")))


def test_clean_profile():
    result = _moderator().moderate_profile(
        name="Ada Lovelace", bio="I like engines.", website="https://example.com"
    )
    assert result.approved
    assert result.issues == []


def test_empty_profile():
    assert _moderator().moderate_profile().approved


def test_every_failing_field_is_reported():
    result = _moderator().moderate_profile(name="heck", bio="heck")
    assert not result.approved
    assert result.issues == [
        "name: Content contains inappropriate language",
        "bio: Content contains inappropriate language",
    ]


def test_name_skips_spam_checks():
    shouty = "JOHNATHAN MCALLISTER-SMITHERSON"
    moderator = _moderator()
    assert moderator.moderate_profile(name=shouty).approved

    result = moderator.moderate_profile(bio=shouty)
    assert result.issues == ["bio: Excessive capitalization detected"]


def test_invalid_website():
    result = _moderator().moderate_profile(website="not a url")
    assert not result.approved
    assert result.issues == ["website: Invalid URL format"]


def test_all_three_fields_fail():
    result = _moderator().moderate_profile(name="heck", bio="buy now", website="nope")
    assert len(result.issues) == 3
    assert result.issues[1] == "bio: Suspected promotional content"


def test_engine_delegates_to_profile_moderator():
    engine = ModerationEngine(matcher=FakeDictionary("heck"))
    assert len(engine.moderate_profile(name="heck", bio="heck").issues) == 2


def test_is_valid_url():
    assert is_valid_url("https://example.com/path?q=1")
    assert is_valid_url("ftp://files.example.org")
    assert is_valid_url("mailto:a@b.com")
    assert is_valid_url("urn:isbn:123")
    assert not is_valid_url("example.com")
    assert not is_valid_url("http://")
    assert not is_valid_url("not a url")
    assert not is_valid_url("https://exa mple.com")
    assert not is_valid_url("http://example.com:notaport")
