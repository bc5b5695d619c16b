"""Reading change documents from the command line."""

from __future__ import annotations

import json
from typing import IO

import click

from changelens_core.commit import parse_commits
from changelens_core.context import ParseContext
from changelens_core.document import load_response
from changelens_core.errors import DocumentError
from changelens_core.models import CommitRecord


def read_records(source: IO[str], context: ParseContext) -> list[CommitRecord]:
    """Parse every change in ``source``; unreadable input becomes a ClickException."""
    try:
        documents = load_response(source.read())
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Input is not valid JSON: {e}") from e
    except DocumentError as e:
        raise click.ClickException(f"Input is not a Gerrit change response: {e}") from e
    return parse_commits(documents, context)
