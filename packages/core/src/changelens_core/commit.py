"""Change document → CommitRecord.

The document format drifts between Gerrit releases (labels only from 2.6,
account details only with DETAILED_ACCOUNTS, messages only with o=MESSAGES)
and draft patch sets hide most revision data from anonymous users. Parsing
therefore never raises: every failure is logged at DEBUG and the affected
fields keep their defaults.

Order of work, mirroring how much of the document each step depends on:

  1. owner — always produced, a placeholder if unreadable
  2. top-level scalars — the first unreadable one ends the parse
  3. labels — both reviewer lists or neither
  4. messages, then revision data — a failure to resolve the revision
     leaves patch_set_number at -1 and "Unknown" author/committer
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

from changelens_core.context import ParseContext
from changelens_core.document import get, require
from changelens_core.errors import DocumentError
from changelens_core.models import ChangedFile, CommitRecord, Committer, Status
from changelens_core.parsers.accounts import parse_account
from changelens_core.parsers.messages import parse_messages
from changelens_core.parsers.reviewers import parse_reviewers
from changelens_core.parsers.revision import RevisionResolver, resolve_revision_id

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (record field, document key), in document reading order.
_IDENTITY_FIELDS = (
    ("kind", "kind"),
    ("id", "id"),
    ("project", "project"),
    ("branch", "branch"),
    ("change_id", "change_id"),
    ("subject", "subject"),
)
_DATE_FIELDS = (
    ("created_date", "created"),
    ("last_updated_date", "updated"),
)
_LABEL_VERIFIED = "Verified"
_LABEL_CODE_REVIEW = "Code-Review"


def _attempt(read: Callable[[], T], default: T, what: str) -> T:
    try:
        return read()
    except DocumentError as e:
        logger.debug("Failed to get %s: %s", what, e)
        return default


def _parse_owner(document, context: ParseContext) -> Committer:
    try:
        return parse_account(document, "owner")
    except DocumentError as e:
        # Every change has an owner; reaching this means a broken server.
        logger.warning("Failed to find commit owner: %s", e)
        return Committer(
            name=context.strings.unknown,
            email=get(document, "owner", "email", kind="string"),
            account_id=get(document, "owner", "_account_id", kind="integer"),
        )


def _read_mergeable(document) -> bool:
    mergeable = get(document, "mergeable", kind="boolean")
    if mergeable is None:
        # Merged and abandoned changes carry no mergeable flag.
        logger.debug("No mergeable flag, treating change as not mergeable")
        return False
    return mergeable


def _read_top_level(document, context: ParseContext, fields: dict) -> None:
    """Fill ``fields`` in document order; raises on the first unreadable field."""
    for attr, key in _IDENTITY_FIELDS:
        fields[attr] = require(document, key, kind="string")
    fields["status"] = Status.from_value(require(document, "status", kind="string"))
    for attr, key in _DATE_FIELDS:
        fields[attr] = require(document, key, kind="string")
    fields["is_mergeable"] = _read_mergeable(document)
    fields["sort_key"] = require(document, "_sortkey", kind="string")
    fields["commit_number"] = require(document, "_number", kind="integer")
    fields["web_address"] = context.web_address(fields["commit_number"])


def _read_labels(document, fields: dict) -> None:
    # 2.5 servers only list the permitted values; voters arrive with 2.6.
    try:
        verified = parse_reviewers(
            require(document, "labels", _LABEL_VERIFIED, "all", kind="array"),
            ("labels", _LABEL_VERIFIED, "all"),
        )
        code_review = parse_reviewers(
            require(document, "labels", _LABEL_CODE_REVIEW, "all", kind="array"),
            ("labels", _LABEL_CODE_REVIEW, "all"),
        )
    except DocumentError as e:
        logger.debug("Failed to get reviewer labels: %s", e)
        return
    fields["verified_reviewers"] = tuple(verified)
    fields["code_reviewers"] = tuple(code_review)
    fields["labels_resolved"] = True


def _read_revision(document, context: ParseContext, fields: dict) -> None:
    """Fill revision-dependent fields; raises once the revision itself is unreachable.

    A change listing (no direct patch set query) has no current revision, and
    a draft current revision is hidden from us. Message and file list fall
    back to the draft notice on their own; the patch set number is read last
    and its failure ends the block.
    """
    notice = context.strings.draft_notice

    revision_id = resolve_revision_id(document)
    fields["current_revision"] = revision_id
    resolver = RevisionResolver(document, revision_id)

    fields["message"] = _attempt(resolver.message, notice, "commit message")
    fields["changed_files"] = _attempt(
        lambda: tuple(resolver.changed_files()), (ChangedFile.draft(notice),), "changed files"
    )
    try:
        fields["author"] = resolver.author()
        fields["committer"] = resolver.committer()
    except DocumentError as e:
        logger.debug("Failed to get author/committer objects: %s", e)
    fields["patch_set_number"] = resolver.patch_set_number()


def parse_commit(document: dict, context: ParseContext) -> CommitRecord:
    """Parse one change document. Never raises for a malformed document."""
    fields: dict = {}
    owner = _parse_owner(document, context)

    try:
        _read_top_level(document, context, fields)
    except DocumentError as e:
        logger.debug("Failed to parse change document into useful data: %s", e)
        return CommitRecord(owner=owner, raw_document=document, **fields)

    _read_labels(document, fields)

    fields["messages"] = _attempt(lambda: tuple(parse_messages(document)), (), "messages")
    try:
        _read_revision(document, context, fields)
    except DocumentError as e:
        logger.debug("Revision data unavailable: %s", e)
        unknown = context.strings.unknown
        fields["patch_set_number"] = -1
        fields["author"] = Committer.unknown(unknown)
        fields["committer"] = Committer.unknown(unknown)

    return CommitRecord(owner=owner, raw_document=document, **fields)


def parse_commits(documents: Iterable[dict], context: ParseContext) -> list[CommitRecord]:
    """Parse each document of a query result independently."""
    return [parse_commit(document, context) for document in documents]
