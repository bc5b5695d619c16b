"""Commit record data model.

A :class:`CommitRecord` is built once from a single change document by
:func:`changelens_core.commit.parse_commit` and never mutated afterwards.
Optional nested data is ``None`` (scalars) or an empty tuple (lists) when the
server did not supply it or it could not be read.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from changelens_core.errors import UnknownStatusError


class Status(enum.Enum):
    NEW = "NEW"
    SUBMITTED = "SUBMITTED"
    MERGED = "MERGED"
    ABANDONED = "ABANDONED"

    @classmethod
    def from_value(cls, value: str) -> Status:
        """Map a server status string onto a variant (case-sensitive)."""
        try:
            return cls[value]
        except KeyError:
            raise UnknownStatusError(value) from None


@dataclass(frozen=True)
class Committer:
    """A Gerrit account in one of its roles: owner, author or committer."""

    name: str
    email: str | None = None
    date: str | None = None  # raw server timestamp
    timezone_offset: int | None = None  # minutes east of UTC
    account_id: int | None = None

    @classmethod
    def unknown(cls, text: str) -> Committer:
        """Placeholder shown when the account could not be read."""
        return cls(name=text, email=text)


@dataclass(frozen=True)
class Reviewer:
    name: str
    email: str
    vote_value: int | None = None  # None means no vote recorded, 0 is a neutral vote


@dataclass(frozen=True)
class ChangedFile:
    """One entry of a revision's file list.

    When the current revision is a draft the server hides its files; the list
    then holds a single placeholder whose only content is ``draft_notice``.
    """

    path: str | None
    lines_inserted: int | None = None
    lines_deleted: int | None = None
    status: str | None = None  # A, D, R or C; None means modified
    old_path: str | None = None
    binary: bool = False
    draft_notice: str | None = None

    @classmethod
    def draft(cls, notice: str) -> ChangedFile:
        return cls(path=None, draft_notice=notice)

    @property
    def is_placeholder(self) -> bool:
        return self.draft_notice is not None


@dataclass(frozen=True)
class CommitComment:
    """A review message posted on the change."""

    id: str | None
    author: Committer | None
    date: str | None
    message: str | None
    revision_number: int | None = None
    raw: dict = field(default_factory=dict, repr=False, compare=False, hash=False)


@dataclass(frozen=True)
class CommitRecord:
    """Strongly-typed view of one Gerrit change."""

    owner: Committer
    raw_document: dict | None = field(default=None, repr=False, compare=False, hash=False)

    kind: str | None = None
    id: str | None = None
    change_id: str | None = None
    project: str | None = None
    branch: str | None = None
    subject: str | None = None
    status: Status | None = None
    created_date: str | None = None
    last_updated_date: str | None = None
    is_mergeable: bool = False
    sort_key: str | None = None
    commit_number: int | None = None
    web_address: str | None = None

    # Labels: empty when absent, labels_resolved tells "not attempted" from "empty".
    verified_reviewers: tuple[Reviewer, ...] = ()
    code_reviewers: tuple[Reviewer, ...] = ()
    labels_resolved: bool = False

    messages: tuple[CommitComment, ...] = ()

    # Revision-dependent data.
    current_revision: str | None = None
    message: str | None = None
    changed_files: tuple[ChangedFile, ...] = ()
    author: Committer | None = None
    committer: Committer | None = None
    patch_set_number: int = -1

    @property
    def revision_resolved(self) -> bool:
        return self.patch_set_number != -1
