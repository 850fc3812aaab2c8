from __future__ import annotations

from datetime import date
from itertools import count
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from timebox.config import AgendaSettings, AppSettings, StorageSettings, SupabaseSettings
from timebox.data import SessionStore
from timebox.domain import Activity
from timebox.engine import GridConfig


class FakeQuery:
    """Just enough of the supabase-py query builder for the repository."""

    def __init__(self, client: "FakeSupabaseClient", name: str) -> None:
        self.client = client
        self.rows: List[Dict[str, Any]] = client.tables.setdefault(name, [])
        self.operation = "select"
        self.payload: Optional[Dict[str, Any]] = None
        self.filters: List[tuple] = []
        self.row_limit: Optional[int] = None

    def select(self, *_columns: str) -> "FakeQuery":
        return self

    def insert(self, record: Dict[str, Any]) -> "FakeQuery":
        self.operation, self.payload = "insert", dict(record)
        return self

    def update(self, record: Dict[str, Any]) -> "FakeQuery":
        self.operation, self.payload = "update", dict(record)
        return self

    def delete(self) -> "FakeQuery":
        self.operation = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.row_limit = size
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self) -> SimpleNamespace:
        self.client.calls.append(self.operation)
        if self.operation == "insert":
            row = {**self.payload, "id": f"act-{next(self.client.ids)}"}
            self.rows.append(row)
            return SimpleNamespace(data=[dict(row)])
        matched = [row for row in self.rows if self._matches(row)]
        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
        elif self.operation == "delete":
            self.rows[:] = [row for row in self.rows if not self._matches(row)]
        if self.row_limit is not None:
            matched = matched[: self.row_limit]
        return SimpleNamespace(data=[dict(row) for row in matched])


class FakeSupabaseClient:
    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.ids = count(1)
        self.calls: List[str] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


def build_settings(**agenda: Any) -> AppSettings:
    return AppSettings(
        supabase=SupabaseSettings(url=None, anon_key=None),
        storage=StorageSettings(activities_table="activities"),
        grid=GridConfig(),
        agenda=AgendaSettings(**agenda),
    )


@pytest.fixture
def make_activity():
    ids = count(1)

    def factory(
        start: str = "09:00",
        end: str = "10:00",
        *,
        day: date = date(2024, 3, 1),
        title: Optional[str] = None,
        category: str = "work",
        completed: bool = False,
        activity_id: Optional[str] = None,
    ) -> Activity:
        number = next(ids)
        return Activity(
            id=activity_id or f"a{number}",
            owner="Miguel",
            title=title or f"Activity {number}",
            date=day,
            start_time=start,
            end_time=end,
            category=category,
            completed=completed,
        )

    return factory


@pytest.fixture
def fake_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def session_store(tmp_path) -> SessionStore:
    return SessionStore(tmp_path / "session.json")


@pytest.fixture
def service_context(fake_client, session_store):
    from timebox.services import ServiceContext

    context = ServiceContext(settings=build_settings(), sessions=session_store)
    context.gateway.use_client(fake_client)
    return context


@pytest.fixture
def api(service_context):
    from timebox.api import api_state

    previous = api_state.context
    api_state.reset(service_context)
    yield api_state
    api_state.reset(previous)
