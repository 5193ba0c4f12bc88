"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import itertools
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._action = None
        self._payload = None
        self._filters = []

    def insert(self, payload):
        self._action = "insert"
        self._payload = payload
        return self

    def delete(self):
        self._action = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def execute(self):
        self._db.calls.append((self._action, self._table))
        error = self._db.raise_on.get((self._action, self._table))
        if error is not None:
            raise error
        if self._table in self._db.fail_on.get(self._action, set()):
            raise APIError({"message": f"{self._action} on {self._table} failed", "code": "500"})

        rows = self._db.tables.setdefault(self._table, [])
        if self._action == "insert":
            row = {"id": f"{self._table}-{next(self._db.ids)}", **self._payload}
            rows.append(row)
            return SimpleNamespace(data=[row])

        removed = [r for r in rows if all(r.get(c) == v for c, v in self._filters)]
        self._db.tables[self._table] = [r for r in rows if r not in removed]
        return SimpleNamespace(data=removed)


class FakeSupabase:
    """Records rows per table.

    ``fail_on`` maps an action to tables whose statements are rejected with
    ``APIError``; ``raise_on`` maps an ``(action, table)`` pair to any other
    exception to raise, such as an httpx transport error.
    """

    def __init__(self, users=None):
        self.tables = {}
        self.calls = []
        self.fail_on = {}
        self.raise_on = {}
        self.ids = itertools.count(1)
        self._users = users or {}
        self.auth = SimpleNamespace(get_user=self._get_user)

    def table(self, name):
        return FakeQuery(self, name)

    def _get_user(self, token):
        user_id = self._users.get(token)
        user = SimpleNamespace(id=user_id) if user_id else None
        return SimpleNamespace(user=user)


@pytest.fixture
def fake_db():
    return FakeSupabase(users={"good-token": "user-1"})
