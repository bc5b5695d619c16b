"""Changed-file list of a revision."""

from __future__ import annotations

import logging

from changelens_core.document import optional
from changelens_core.errors import DocumentError, FieldTypeError
from changelens_core.models import ChangedFile

logger = logging.getLogger(__name__)


def _parse_file(file_path: str, stats, path: tuple) -> ChangedFile:
    if not isinstance(stats, dict):
        raise FieldTypeError(path, "object", stats)
    return ChangedFile(
        path=file_path,
        lines_inserted=optional(stats, "lines_inserted", kind="integer"),
        lines_deleted=optional(stats, "lines_deleted", kind="integer"),
        status=optional(stats, "status", kind="string"),
        old_path=optional(stats, "old_path", kind="string"),
        binary=bool(optional(stats, "binary", kind="boolean")),
    )


def parse_changed_files(files, path: tuple = ("files",)) -> list[ChangedFile]:
    """Convert a ``{path: stats}`` mapping into ChangedFile entries.

    Entries come out in the mapping's iteration order, which is whatever the
    JSON decoder produced and is not part of the contract. A malformed entry
    is skipped on its own; the rest of the mapping is still read.
    """
    if not isinstance(files, dict):
        raise FieldTypeError(path, "object", files)

    changed: list[ChangedFile] = []
    for file_path, stats in files.items():
        try:
            changed.append(_parse_file(file_path, stats, path + (file_path,)))
        except DocumentError as e:
            logger.debug("Skipping changed file entry: %s", e)
    return changed
