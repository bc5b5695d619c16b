"""Approval votes of one label (``labels.<name>.all``)."""

from __future__ import annotations

import logging

from changelens_core.document import get, require
from changelens_core.errors import DocumentError, FieldTypeError
from changelens_core.models import Reviewer

logger = logging.getLogger(__name__)


def parse_reviewers(votes, path: tuple = ("all",)) -> list[Reviewer]:
    """Return one Reviewer per vote entry, in array order.

    Entries without a readable ``name`` and ``email`` are skipped. A missing
    or unreadable ``value`` leaves the vote unset rather than zero.
    """
    if not isinstance(votes, list):
        raise FieldTypeError(path, "array", votes)

    reviewers: list[Reviewer] = []
    for index, entry in enumerate(votes):
        try:
            name = require(entry, "name", kind="string")
            email = require(entry, "email", kind="string")
        except DocumentError as e:
            logger.debug("Skipping vote %s[%d]: %s", ".".join(path), index, e)
            continue
        reviewers.append(Reviewer(name=name, email=email, vote_value=get(entry, "value", kind="integer")))
    return reviewers
