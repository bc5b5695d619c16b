"""User-facing text injected into parsing and display."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Mapping

from changelens_core.models import Status


@dataclass(frozen=True)
class LocaleStrings:
    """Resource strings for one locale. Defaults are English."""

    draft_notice: str = "The current revision is a draft and its details are not visible."
    unknown: str = "Unknown"
    at: str = "at"
    explain_new: str = "Open and waiting for review."
    explain_submitted: str = "Approved and submitted, waiting to be merged."
    explain_merged: str = "Merged into the destination branch."
    explain_abandoned: str = "Abandoned and will not be merged."

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, str] | None) -> LocaleStrings:
        if not overrides:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown string key(s): {', '.join(unknown)}")
        return replace(cls(), **{k: str(v) for k, v in overrides.items()})


_EXPLANATION_FIELDS = {
    Status.NEW: "explain_new",
    Status.SUBMITTED: "explain_submitted",
    Status.MERGED: "explain_merged",
    Status.ABANDONED: "explain_abandoned",
}


def explain(status: Status, strings: LocaleStrings) -> str:
    """Return a human readable explanation of ``status``."""
    return getattr(strings, _EXPLANATION_FIELDS[status])
