"""Review messages of a change (``messages``, only sent with ``o=MESSAGES``)."""

from __future__ import annotations

import logging

from changelens_core.document import optional, require
from changelens_core.errors import DocumentError
from changelens_core.models import CommitComment
from changelens_core.parsers.accounts import parse_account

logger = logging.getLogger(__name__)


def _parse_message(document, index: int) -> CommitComment:
    path = ("messages", index)
    entry = require(document, *path, kind="object")

    author = None
    if entry.get("author") is not None:
        try:
            author = parse_account(document, *path, "author")
        except DocumentError as e:
            logger.debug("Message without a readable author: %s", e)

    return CommitComment(
        id=optional(document, *path, "id", kind="string"),
        author=author,
        date=optional(document, *path, "date", kind="string"),
        message=optional(document, *path, "message", kind="string"),
        revision_number=optional(document, *path, "_revision_number", kind="integer"),
        raw=entry,
    )


def parse_messages(document) -> list[CommitComment]:
    """Return the change's review messages in server order.

    An absent ``messages`` field and an empty array both give ``[]``.
    """
    messages = optional(document, "messages", kind="array")
    if messages is None:
        return []
    return [_parse_message(document, index) for index in range(len(messages))]
