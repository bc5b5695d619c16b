"""Structural (de)serialization of CommitRecords for transfer between processes.

The raw change document is not transferred; a decoded record has
``raw_document=None``.
"""

from __future__ import annotations

import json

from changelens_core.models import ChangedFile, CommitComment, CommitRecord, Committer, Reviewer, Status


def _committer_to_dict(committer: Committer | None) -> dict | None:
    if committer is None:
        return None
    return {
        "name": committer.name,
        "email": committer.email,
        "date": committer.date,
        "timezone_offset": committer.timezone_offset,
        "account_id": committer.account_id,
    }


def _committer_from_dict(d: dict | None) -> Committer | None:
    if d is None:
        return None
    return Committer(
        name=d.get("name", ""),
        email=d.get("email"),
        date=d.get("date"),
        timezone_offset=d.get("timezone_offset"),
        account_id=d.get("account_id"),
    )


def _reviewer_to_dict(r: Reviewer) -> dict:
    return {"name": r.name, "email": r.email, "vote_value": r.vote_value}


def _reviewer_from_dict(d: dict) -> Reviewer:
    return Reviewer(name=d.get("name", ""), email=d.get("email", ""), vote_value=d.get("vote_value"))


def _file_to_dict(f: ChangedFile) -> dict:
    return {
        "path": f.path,
        "lines_inserted": f.lines_inserted,
        "lines_deleted": f.lines_deleted,
        "status": f.status,
        "old_path": f.old_path,
        "binary": f.binary,
        "draft_notice": f.draft_notice,
    }


def _file_from_dict(d: dict) -> ChangedFile:
    return ChangedFile(
        path=d.get("path"),
        lines_inserted=d.get("lines_inserted"),
        lines_deleted=d.get("lines_deleted"),
        status=d.get("status"),
        old_path=d.get("old_path"),
        binary=d.get("binary", False),
        draft_notice=d.get("draft_notice"),
    )


def _comment_to_dict(c: CommitComment) -> dict:
    return {
        "id": c.id,
        "author": _committer_to_dict(c.author),
        "date": c.date,
        "message": c.message,
        "revision_number": c.revision_number,
        "raw": c.raw,
    }


def _comment_from_dict(d: dict) -> CommitComment:
    return CommitComment(
        id=d.get("id"),
        author=_committer_from_dict(d.get("author")),
        date=d.get("date"),
        message=d.get("message"),
        revision_number=d.get("revision_number"),
        raw=d.get("raw") or {},
    )


def record_to_dict(record: CommitRecord) -> dict:
    """Return a JSON-safe dict holding every field except ``raw_document``."""
    return {
        "kind": record.kind,
        "id": record.id,
        "change_id": record.change_id,
        "project": record.project,
        "branch": record.branch,
        "subject": record.subject,
        "status": record.status.name if record.status is not None else None,
        "created_date": record.created_date,
        "last_updated_date": record.last_updated_date,
        "is_mergeable": record.is_mergeable,
        "sort_key": record.sort_key,
        "commit_number": record.commit_number,
        "web_address": record.web_address,
        "owner": _committer_to_dict(record.owner),
        "verified_reviewers": [_reviewer_to_dict(r) for r in record.verified_reviewers],
        "code_reviewers": [_reviewer_to_dict(r) for r in record.code_reviewers],
        "labels_resolved": record.labels_resolved,
        "messages": [_comment_to_dict(c) for c in record.messages],
        "current_revision": record.current_revision,
        "message": record.message,
        "changed_files": [_file_to_dict(f) for f in record.changed_files],
        "author": _committer_to_dict(record.author),
        "committer": _committer_to_dict(record.committer),
        "patch_set_number": record.patch_set_number,
    }


def record_from_dict(d: dict) -> CommitRecord:
    status = d.get("status")
    return CommitRecord(
        owner=_committer_from_dict(d.get("owner")) or Committer(name=""),
        raw_document=None,
        kind=d.get("kind"),
        id=d.get("id"),
        change_id=d.get("change_id"),
        project=d.get("project"),
        branch=d.get("branch"),
        subject=d.get("subject"),
        status=Status[status] if status is not None else None,
        created_date=d.get("created_date"),
        last_updated_date=d.get("last_updated_date"),
        is_mergeable=d.get("is_mergeable", False),
        sort_key=d.get("sort_key"),
        commit_number=d.get("commit_number"),
        web_address=d.get("web_address"),
        verified_reviewers=tuple(_reviewer_from_dict(r) for r in d.get("verified_reviewers", [])),
        code_reviewers=tuple(_reviewer_from_dict(r) for r in d.get("code_reviewers", [])),
        labels_resolved=d.get("labels_resolved", False),
        messages=tuple(_comment_from_dict(c) for c in d.get("messages", [])),
        current_revision=d.get("current_revision"),
        message=d.get("message"),
        changed_files=tuple(_file_from_dict(f) for f in d.get("changed_files", [])),
        author=_committer_from_dict(d.get("author")),
        committer=_committer_from_dict(d.get("committer")),
        patch_set_number=d.get("patch_set_number", -1),
    )


def dumps(record: CommitRecord, **kwargs) -> str:
    return json.dumps(record_to_dict(record), **kwargs)


def loads(text: str) -> CommitRecord:
    return record_from_dict(json.loads(text))
