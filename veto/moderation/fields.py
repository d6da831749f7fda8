"""Multi-field moderation.

Fields are checked in the order given and the first rejected field ends
the run; fields after it are never evaluated.  Auto-cleaned values replace
the originals before the next field is checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping

from veto.moderation.models import FieldModerationResult

if TYPE_CHECKING:
    from veto.moderation.engine import ModerationEngine


class MultiFieldModerator:
    def __init__(self, engine: ModerationEngine) -> None:
        self._engine = engine

    def moderate_fields(
        self,
        fields: Mapping[str, Any] | Iterable[tuple[str, Any]],
        auto_clean: bool = False,
    ) -> FieldModerationResult:
        values: dict[str, Any] = dict(fields.items() if isinstance(fields, Mapping) else fields)

        for name in list(values):
            text = values[name]
            if not text or not isinstance(text, str):
                continue

            result = self._engine.moderate_text(text, auto_clean=auto_clean)
            if not result.approved:
                return FieldModerationResult(
                    approved=False,
                    failed_field=name,
                    reason=f"{name}: {result.reason}",
                    flags=list(result.flags),
                    fields=values,
                )

            if result.cleaned_text:
                values[name] = result.cleaned_text

        return FieldModerationResult(approved=True, fields=values)
