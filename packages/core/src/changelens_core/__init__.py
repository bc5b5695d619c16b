"""Defensive parsing of Gerrit change documents into immutable commit records."""

from changelens_core.commit import parse_commit, parse_commits
from changelens_core.context import ParseContext
from changelens_core.models import ChangedFile, CommitComment, CommitRecord, Committer, Reviewer, Status
from changelens_core.strings import LocaleStrings, explain

__all__ = [
    "ChangedFile",
    "CommitComment",
    "CommitRecord",
    "Committer",
    "LocaleStrings",
    "ParseContext",
    "Reviewer",
    "Status",
    "explain",
    "parse_commit",
    "parse_commits",
]
