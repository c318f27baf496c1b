"""Fixtures for the test suite."""

import pytest
from sqlalchemy import create_engine

from mailchimp_sync.backends import BatchRequest, BatchResponse
from mailchimp_sync.backends.base import BaseBackend


@pytest.fixture
def make_database(tmp_path):
    """
    Create a SQLite database holding a `members` table and return its URL.

    Rows are (firstname, lastname, email) tuples, NULL allowed.
    """

    def _make_database(rows=()):
        url = f"sqlite:///{tmp_path / 'members.sqlite3'}"
        engine = create_engine(url)
        with engine.begin() as connection:
            connection.exec_driver_sql(
                "CREATE TABLE members (id INTEGER PRIMARY KEY, firstname TEXT, lastname TEXT, email TEXT)"
            )
            for row in rows:
                connection.exec_driver_sql(
                    "INSERT INTO members (firstname, lastname, email) VALUES (?, ?, ?)",
                    tuple(row),
                )
        engine.dispose()
        return url

    return _make_database


class RecordingBackend(BaseBackend):
    """Backend keeping every submitted batch and answering with canned responses."""

    def __init__(self, responses=None):
        """Initialize the backend with the responses to return, in order."""
        self.requests = []
        self._responses = list(responses or [])

    def batch_subscribe(self, batch_request: BatchRequest, timeout: int = None) -> BatchResponse:
        """Record the batch and return the next canned response."""
        self.requests.append((batch_request, timeout))
        if self._responses:
            return self._responses.pop(0)
        return BatchResponse(added_count=len(batch_request.entries))


@pytest.fixture
def recording_backend():
    """Return a backend recording submitted batches."""
    return RecordingBackend()
