"""Shared fixtures: an in-memory stand-in for the Supabase table query builder"""
import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

from app.infra.supabase.repositories.todos import TodoRepository
from app.models.todo import Todo

OWNER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_ID = "22222222-2222-2222-2222-222222222222"

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]]):
        self.data = data
        self.count = len(data)


class FakeQuery:
    """Supports the subset of the postgrest builder the repositories use"""

    def __init__(self, client: "FakeSupabaseClient", table: str):
        self._client = client
        self._table = table
        self._op = "select"
        self._payload: Optional[Dict[str, Any]] = None
        self._filters: List[tuple] = []
        self._order: Optional[tuple] = None
        self._limit: Optional[int] = None

    def select(self, *args, **kwargs):
        self._op = "select"
        return self

    def insert(self, payload):
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload):
        self._op = "update"
        self._payload = payload
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def execute(self) -> FakeResponse:
        self._client.calls.append((self._table, self._op, list(self._filters)))
        if self._op in self._client.fail_ops:
            raise RuntimeError(f"simulated {self._op} failure")

        rows = self._client.tables.setdefault(self._table, [])
        matched = [r for r in rows if all(r.get(c) == v for c, v in self._filters)]

        if self._op == "insert":
            row = self._client.new_row(self._payload)
            rows.append(row)
            return FakeResponse([copy.deepcopy(row)])

        if self._op == "update":
            for row in matched:
                row.update(copy.deepcopy(self._payload))
            return FakeResponse([copy.deepcopy(r) for r in matched])

        if self._op == "delete":
            self._client.tables[self._table] = [r for r in rows if r not in matched]
            return FakeResponse([copy.deepcopy(r) for r in matched])

        if self._order:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: r.get(column) or "", reverse=desc)
        if self._limit:
            matched = matched[: self._limit]
        return FakeResponse([copy.deepcopy(r) for r in matched])


class FakeSupabaseClient:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.fail_ops = set()
        self.calls: List[tuple] = []
        self._seq = 0

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def new_row(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self._seq += 1
        row = {
            "id": str(uuid.uuid4()),
            "description": None,
            "due_date": None,
            "priority": "medium",
            "category": [],
            "completed": False,
            "created_date": (BASE_TIME + timedelta(minutes=self._seq)).isoformat(),
        }
        row.update(copy.deepcopy(payload))
        return row

    def seed(self, table: str, **fields) -> Dict[str, Any]:
        row = self.new_row(fields)
        self.tables.setdefault(table, []).append(row)
        return row


@pytest.fixture
def fake_client():
    return FakeSupabaseClient()


@pytest.fixture
def repo(fake_client):
    return TodoRepository(fake_client)


@pytest.fixture
def make_todo():
    """Build Todo models directly for the pure view functions"""
    counter = {"n": 0}

    def _make(**overrides) -> Todo:
        counter["n"] += 1
        fields = {
            "id": f"todo-{counter['n']}",
            "user_id": OWNER_ID,
            "title": f"Todo {counter['n']}",
            "created_date": BASE_TIME + timedelta(hours=counter["n"]),
        }
        fields.update(overrides)
        return Todo(**fields)

    return _make
