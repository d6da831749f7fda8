"""Tests for multi-field moderation."""

from tests.fakes import FakeDictionary
from veto.moderation.engine import ModerationEngine
from veto.moderation.fields import MultiFieldModerator
from veto.moderation.models import ModerationFlag


def _engine(matcher=None) -> ModerationEngine:
    return ModerationEngine(matcher=matcher or FakeDictionary("heck"))


def test_all_fields_clean():
    result = MultiFieldModerator(_engine()).moderate_fields(
        {"title": "Hello", "body": "A calm post"}
    )
    assert result.approved
    assert result.failed_field is None
    assert result.fields == {"title": "Hello", "body": "A calm post"}


def test_first_failure_stops_evaluation():
    matcher = FakeDictionary("heck")
    result = MultiFieldModerator(_engine(matcher)).moderate_fields(
        [("title", "what the heck"), ("body", "a perfectly clean body")]
    )
    assert not result.approved
    assert result.failed_field == "title"
    assert result.reason == "title: Content contains inappropriate language"
    assert result.flags == [ModerationFlag.PROFANITY]
    assert matcher.calls == ["what the heck"]


def test_order_is_caller_supplied():
    matcher = FakeDictionary("heck")
    result = MultiFieldModerator(_engine(matcher)).moderate_fields(
        [("body", "buy now"), ("title", "heck")]
    )
    assert result.failed_field == "body"
    assert matcher.calls == ["buy now"]


def test_auto_clean_replaces_values_and_continues():
    matcher = FakeDictionary("heck")
    result = MultiFieldModerator(_engine(matcher)).moderate_fields(
        {"title": "heck yes", "body": "fine"}, auto_clean=True
    )
    assert result.approved
    assert result.fields == {"title": "**** yes", "body": "fine"}
    assert matcher.calls == ["heck yes", "fine"]


def test_non_string_and_empty_fields_are_skipped():
    matcher = FakeDictionary("heck")
    result = MultiFieldModerator(_engine(matcher)).moderate_fields(
        {"tags": ["heck"], "summary": "", "views": 3, "body": "heck"}
    )
    assert result.failed_field == "body"
    assert matcher.calls == ["heck"]


def test_engine_delegates_to_field_moderator():
    result = _engine().moderate_fields([("title", "heck")])
    assert result.failed_field == "title"
