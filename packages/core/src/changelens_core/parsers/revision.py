"""Access to the data of one revision (patch set) of a change."""

from __future__ import annotations

import json
import logging

from changelens_core.document import require
from changelens_core.errors import FieldTypeError, MissingFieldError
from changelens_core.models import ChangedFile, Committer
from changelens_core.parsers.accounts import parse_account
from changelens_core.parsers.files import parse_changed_files

logger = logging.getLogger(__name__)

ROLES = ("author", "committer")


def _as_text(value) -> str:
    # Non-string values become compact JSON text ("42", "true", "{...}").
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def resolve_revision_id(document) -> str:
    """Return the id of the revision the change document was queried for.

    Reads ``current_revision``. When that is missing the value of
    ``revisions`` is used as the id instead. Either value is rendered as JSON
    text when it is not a string. ``revisions`` is a mapping keyed by revision
    id, so this fallback rarely names a real revision.
    """
    # FIXME: confirm with product whether the fallback should use the single
    # key of the revisions mapping instead of the mapping itself.
    if not isinstance(document, dict):
        raise FieldTypeError((), "object", document)

    current = document.get("current_revision")
    if current is not None:
        return _as_text(current)
    logger.debug("current_revision unavailable, falling back to revisions")

    revisions = document.get("revisions")
    if revisions is None:
        raise MissingFieldError(("revisions",))
    return _as_text(revisions)


class RevisionResolver:
    """Reads ``revisions.<revision_id>`` of a change document.

    Every accessor raises DocumentError on its own when its part of the
    revision cannot be read. Callers decide what to fall back to.
    """

    def __init__(self, document, revision_id: str):
        self._document = document
        self.revision_id = revision_id

    def _path(self, *keys) -> tuple:
        return ("revisions", self.revision_id, *keys)

    def message(self) -> str:
        return require(self._document, *self._path("commit", "message"), kind="string")

    def account(self, role: str) -> Committer:
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role!r}. Choose 'author' or 'committer'.")
        return parse_account(self._document, *self._path("commit", role), require_email=True)

    def author(self) -> Committer:
        return self.account("author")

    def committer(self) -> Committer:
        return self.account("committer")

    def patch_set_number(self) -> int:
        return require(self._document, *self._path("_number"), kind="integer")

    def changed_files(self) -> list[ChangedFile]:
        path = self._path("files")
        return parse_changed_files(require(self._document, *path, kind="object"), path)
