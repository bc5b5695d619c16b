from __future__ import annotations

from changelens_core.document import optional, require
from changelens_core.models import Committer


def parse_account(obj, *path, require_email: bool = False) -> Committer:
    """Build a Committer from the account object at ``path``.

    Owner, author and committer objects share one shape. Pre DETAILED_ACCOUNTS
    servers only send ``name``; ``email``, ``date``, ``tz`` and ``_account_id``
    are read when present.
    """
    name = require(obj, *path, "name", kind="string")
    if require_email:
        email = require(obj, *path, "email", kind="string")
    else:
        email = optional(obj, *path, "email", kind="string")
    return Committer(
        name=name,
        email=email,
        date=optional(obj, *path, "date", kind="string"),
        timezone_offset=optional(obj, *path, "tz", kind="integer"),
        account_id=optional(obj, *path, "_account_id", kind="integer"),
    )
