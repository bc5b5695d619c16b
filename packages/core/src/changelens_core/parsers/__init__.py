"""Leaf parsers for the nested parts of a change document.

Each raises :class:`~changelens_core.errors.DocumentError` on a shape it
cannot read; defaulting is left to :mod:`changelens_core.commit`.
"""
