"""Integration layer between request handlers and the moderation engine.

Validates submitted fields, turns rejections into :class:`ModerationError`
and writes auto-cleaned text back into the payload.  If the engine itself
breaks, the content is let through: a failure in moderation must never
block legitimate content.

Typical use from a request handler::

    gate = ModerationGate.from_config(load_config("veto.yaml"))
    try:
        gate.check_content(body, field="content")
    except ValidationError as e:
        return 400, e.to_dict()
    except ModerationError as e:
        return 400, e.to_dict()
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, MutableMapping

from veto.config import DEFAULT_MAX_LENGTH, ModerationConfig
from veto.errors import ModerationError, ValidationError
from veto.moderation.engine import ModerationEngine

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "bio", "website")


def validate_field(
    payload: MutableMapping[str, Any],
    field: str,
    required: bool = True,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str | None:
    """Return the field's text, or *None* when it is optional and absent.

    Raises :class:`ValidationError` when the field is required but missing
    or falsy (an empty string included), is not a string, or is longer
    than *max_length*.
    """
    text = payload.get(field)

    if not text:
        if required:
            raise ValidationError(field, f"Field '{field}' is required")
        return None

    if not isinstance(text, str):
        raise ValidationError(field, f"Field '{field}' must be a string")

    if len(text) > max_length:
        raise ValidationError(
            field, f"Field '{field}' is too long (max {max_length:,} characters)"
        )

    return text


class ModerationGate:
    """Request-level moderation checks with fail-open error handling."""

    def __init__(self, engine: ModerationEngine, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.engine = engine
        self.max_length = max_length

    @classmethod
    def from_config(
        cls, config: ModerationConfig, engine: ModerationEngine | None = None
    ) -> ModerationGate:
        """Build a gate whose length limit comes from *config*.

        The engine is built from the same config unless one is passed in.
        """
        if engine is None:
            engine = ModerationEngine.from_config(config)
        return cls(engine, max_length=config.max_length)

    def check_content(
        self,
        payload: MutableMapping[str, Any],
        field: str = "content",
        auto_clean: bool = False,
        required: bool = True,
    ) -> None:
        """Moderate one field of *payload*, cleaning it in place if asked."""
        if not self.engine.is_enabled():
            return

        text = validate_field(payload, field, required=required, max_length=self.max_length)
        if text is None:
            return

        try:
            result = self.engine.moderate_text(text, auto_clean=auto_clean)
        except Exception:
            logger.exception("Moderation failed for field %r; allowing content through", field)
            return

        if not result.approved:
            raise ModerationError(
                result.reason or "Content did not pass moderation",
                flags=[f.value for f in result.flags],
            )

        if result.cleaned_text:
            payload[field] = result.cleaned_text

    def check_fields(
        self,
        payload: MutableMapping[str, Any],
        fields: Iterable[str],
        auto_clean: bool = False,
    ) -> None:
        """Moderate several fields in order, stopping at the first rejection."""
        if not self.engine.is_enabled():
            return

        ordered = [(name, payload.get(name)) for name in fields]
        try:
            result = self.engine.moderate_fields(ordered, auto_clean=auto_clean)
        except Exception:
            logger.exception("Multi-field moderation failed; allowing content through")
            return

        if not result.approved:
            raise ModerationError(
                result.reason or "Content did not pass moderation",
                flags=[f.value for f in result.flags],
                field=result.failed_field,
            )

        for name, value in result.fields.items():
            if name in payload and payload[name] != value:
                payload[name] = value

    def check_profile(self, payload: MutableMapping[str, Any]) -> None:
        """Moderate the name, bio and website of a profile update."""
        if not self.engine.is_enabled():
            return

        profile = {key: payload.get(key) for key in PROFILE_FIELDS}
        try:
            result = self.engine.moderate_profile(**profile)
        except Exception:
            logger.exception("Profile moderation failed; allowing update through")
            return

        if not result.approved:
            raise ModerationError(
                "Profile contains inappropriate content", issues=result.issues
            )
