"""Safe navigation over a parsed Gerrit JSON document.

Every optional field of a change is looked up through :func:`get` (absent or
mistyped means ``None``) or :func:`require` (absent or mistyped raises a
:class:`~changelens_core.errors.DocumentError` naming the path). Keeping both
in one place makes the "each optional field fails on its own" rule explicit.
"""

from __future__ import annotations

import json
import logging
import re

from changelens_core.errors import DocumentError, FieldTypeError, MissingFieldError

logger = logging.getLogger(__name__)

# Gerrit prefixes every REST response with this line to defeat XSSI.
XSSI_PREFIX = ")]}'"

_NUMERIC_RE = re.compile(r"^[+-]?\d+$")

_KINDS = {
    "object": dict,
    "array": list,
    "string": str,
    "integer": int,
    "boolean": bool,
}


def _coerce(value, kind: str, path: tuple):
    if kind == "integer":
        # bool is an int subclass but never a valid JSON number here.
        if isinstance(value, bool):
            raise FieldTypeError(path, kind, value)
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _NUMERIC_RE.match(value.strip()):
            return int(value.strip())
        raise FieldTypeError(path, kind, value)
    if kind == "boolean":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise FieldTypeError(path, kind, value)
    if not isinstance(value, _KINDS[kind]):
        raise FieldTypeError(path, kind, value)
    return value


def require(obj, *path, kind: str = "object"):
    """Return the value at ``path`` converted to ``kind`` or raise.

    Intermediate steps must be JSON objects, or arrays when the key is an
    int. ``null`` counts as missing. Integers and booleans also accept their
    string spellings ("42", "true"), which older Gerrit servers emit for some
    fields.
    """
    if kind not in _KINDS:
        raise ValueError(f"Unknown kind: {kind!r}")
    current = obj
    for depth, key in enumerate(path):
        if isinstance(key, int) and isinstance(current, list):
            if not 0 <= key < len(current) or current[key] is None:
                raise MissingFieldError(path[: depth + 1])
            current = current[key]
            continue
        if not isinstance(current, dict):
            raise FieldTypeError(path[:depth], "object", current)
        if current.get(key) is None:
            raise MissingFieldError(path[: depth + 1])
        current = current[key]
    return _coerce(current, kind, tuple(path))


def optional(obj, *path, kind: str = "object"):
    """Like :func:`require`, but an absent field yields ``None``.

    A field that is present with the wrong type still raises.
    """
    try:
        return require(obj, *path, kind=kind)
    except MissingFieldError:
        return None


def get(obj, *path, kind: str | None = None):
    """Return the value at ``path`` or ``None`` when it cannot be read."""
    try:
        if kind is None:
            current = obj
            for key in path:
                if isinstance(key, int) and isinstance(current, list):
                    current = current[key] if 0 <= key < len(current) else None
                elif isinstance(current, dict):
                    current = current.get(key)
                else:
                    return None
            return current
        return require(obj, *path, kind=kind)
    except DocumentError:
        return None


def load_response(text: str) -> list[dict]:
    """Decode a raw Gerrit response body into a list of change documents.

    Strips the XSSI guard line when present. A single change object becomes a
    one-element list so callers can always iterate. Raises ``json.JSONDecodeError``
    for malformed JSON and :class:`DocumentError` when the payload is neither a
    change object nor an array of them.
    """
    body = text.lstrip()
    if body.startswith(XSSI_PREFIX):
        body = body[len(XSSI_PREFIX) :]
    data = json.loads(body)

    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise FieldTypeError((), "object or array", data)
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise FieldTypeError((index,), "object", entry)
    logger.debug("Loaded %d change document(s)", len(data))
    return data
