"""Display formatting of Gerrit timestamps.

Gerrit reports times as ``2013-06-09 19:47:40.000000000`` in the server's
zone. The fractional digits carry no information and are ignored.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, tzinfo

from changelens_core.context import ParseContext
from changelens_core.models import CommitRecord

logger = logging.getLogger(__name__)

SERVER_FORMAT = "%Y-%m-%d %H:%M:%S"
_TIMESTAMP_RE = re.compile(r"^(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})(?:\.\d*)?$")


def parse_timestamp(raw: str, server_timezone: tzinfo) -> datetime | None:
    """Return an aware datetime for ``raw``, or None if it is not a server timestamp."""
    match = _TIMESTAMP_RE.match(raw.strip())
    if not match:
        return None
    try:
        naive = datetime.strptime(match.group(1), SERVER_FORMAT)
    except ValueError:
        return None
    return naive.replace(tzinfo=server_timezone)


def format_timestamp(raw: str | None, context: ParseContext) -> str | None:
    """Render a server timestamp in the local zone, e.g. ``June 09, 2013 at 07:47:40 PM``.

    A value that cannot be parsed is returned unchanged.
    """
    if raw is None:
        return None
    moment = parse_timestamp(raw, context.server_timezone)
    if moment is None:
        logger.debug("Unparseable server timestamp: %r", raw)
        return raw
    logger.debug("Local timezone: %s | Server timezone: %s", context.local_timezone or "host", context.server_timezone)
    local = moment.astimezone(context.local_timezone)
    return f"{local.strftime('%B %d, %Y')} {context.strings.at} {local.strftime('%I:%M:%S %p')}"


def format_last_updated(record: CommitRecord, context: ParseContext) -> str | None:
    return format_timestamp(record.last_updated_date, context)
