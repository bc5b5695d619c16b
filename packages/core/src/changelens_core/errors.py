"""Exceptions raised while reading a Gerrit change document.

Leaf parsers raise these; only the commit driver absorbs them and maps each
failure onto the documented default for the affected field.
"""

from __future__ import annotations


def _format_path(path: tuple) -> str:
    return ".".join(str(p) for p in path) or "<root>"


class DocumentError(Exception):
    """The document disagrees with the expected schema at ``path``."""

    def __init__(self, message: str, path: tuple = ()):
        super().__init__(f"{message}: {_format_path(path)}")
        self.path = path


class MissingFieldError(DocumentError):
    """A field is absent or ``null``."""

    def __init__(self, path: tuple):
        super().__init__("Missing field", path)


class FieldTypeError(DocumentError):
    """A field is present but holds the wrong JSON type."""

    def __init__(self, path: tuple, expected: str, value):
        super().__init__(f"Expected {expected}, got {type(value).__name__}", path)
        self.expected = expected
        self.value = value


class UnknownStatusError(DocumentError):
    """The change status is not one of the known variants."""

    def __init__(self, value: str):
        super().__init__(f"Unknown change status {value!r}", ("status",))
        self.value = value
