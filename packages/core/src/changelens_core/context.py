from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone, tzinfo

from changelens_core.strings import LocaleStrings


@dataclass(frozen=True)
class ParseContext:
    """Collaborators a parse or display call needs from the host application.

    Read-only, so one instance can be shared by concurrent parses.
    """

    server_base_url: str
    server_timezone: tzinfo = timezone.utc
    local_timezone: tzinfo | None = timezone.utc  # None = the host's zone, DST-aware
    strings: LocaleStrings = field(default_factory=LocaleStrings)

    def web_address(self, commit_number: int) -> str:
        return f"{self.server_base_url}#/c/{commit_number}/"
