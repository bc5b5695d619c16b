"""Shared fixtures: a complete change document as served with DETAILED_LABELS,
DETAILED_ACCOUNTS, MESSAGES and CURRENT_REVISION/COMMIT/FILES."""

from __future__ import annotations

import time
from datetime import timezone

import pytest

from changelens_core.context import ParseContext

REVISION = "4f1b2c3d5e6f708192a3b4c5d6e7f8091a2b3c4d"
BASE_URL = "https://review.example.com/"


def make_document() -> dict:
    return {
        "kind": "gerritcodereview#change",
        "id": "platform%2Fbuild~master~I8473b95934b5732ac55d26311a706c9c2bde9940",
        "project": "platform/build",
        "branch": "master",
        "change_id": "I8473b95934b5732ac55d26311a706c9c2bde9940",
        "subject": "Switch to the new toolchain",
        "status": "NEW",
        "created": "2013-06-09 19:47:40.000000000",
        "updated": "2013-06-10 08:15:02.000000000",
        "mergeable": True,
        "_sortkey": "0023412400005a2b",
        "_number": 23082,
        "owner": {"name": "John Doe", "email": "john.doe@example.com", "_account_id": 1000096},
        "labels": {
            "Verified": {"all": [{"value": 1, "name": "Build Bot", "email": "bot@example.com"}]},
            "Code-Review": {
                "all": [
                    {"value": 2, "name": "Jane Roe", "email": "jane@example.com"},
                    {"value": 0, "name": "John Doe", "email": "john.doe@example.com"},
                ]
            },
        },
        "messages": [
            {
                "id": "YH-egE",
                "author": {"name": "John Doe", "email": "john.doe@example.com", "_account_id": 1000096},
                "date": "2013-06-09 19:47:40.000000000",
                "message": "Uploaded patch set 1.",
                "_revision_number": 1,
            },
            {
                "id": "Ym5vdGU",
                "author": {"name": "Jane Roe", "email": "jane@example.com", "_account_id": 1000097},
                "date": "2013-06-10 08:15:02.000000000",
                "message": "Patch Set 2: Code-Review+2",
                "_revision_number": 2,
            },
        ],
        "current_revision": REVISION,
        "revisions": {
            REVISION: {
                "_number": 2,
                "commit": {
                    "message": "Switch to the new toolchain\n\nChange-Id: I8473b95934b5732ac55d26311a706c9c2bde9940\n",
                    "author": {
                        "name": "John Doe",
                        "email": "john.doe@example.com",
                        "date": "2013-06-09 19:40:00.000000000",
                        "tz": 120,
                    },
                    "committer": {
                        "name": "Jane Roe",
                        "email": "jane@example.com",
                        "date": "2013-06-10 08:00:00.000000000",
                        "tz": -420,
                    },
                },
                "files": {
                    "core/main.mk": {"lines_inserted": 5, "lines_deleted": 2},
                    "core/toolchain.mk": {"status": "A", "lines_inserted": 40},
                    "core/old.mk": {"status": "R", "old_path": "core/legacy.mk", "lines_deleted": 1},
                },
            }
        },
    }


@pytest.fixture
def document() -> dict:
    return make_document()


@pytest.fixture
def context() -> ParseContext:
    return ParseContext(server_base_url=BASE_URL, server_timezone=timezone.utc, local_timezone=timezone.utc)


@pytest.fixture
def host_timezone(monkeypatch):
    """Switch the process time zone (POSIX TZ string) for one test."""

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()
