"""Pytest configuration and fixtures.

FakeSupabase mimics the slice of the supabase-py client the services use:
table(...).select/eq/order/limit/insert/execute and
storage.from_(...).upload/remove/list/get_public_url.
"""

import os
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List
from uuid import uuid4

# Keep the developer's .env out of the tests
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

import pytest
from postgrest.exceptions import APIError
from storage3.exceptions import StorageApiError

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

# column the store fills in on insert, per table
STORE_TIMESTAMPS = {"profiles": "created_at", "messages": "timestamp"}
UNIQUE_COLUMNS = {"profiles": ["email"]}


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self._filters: List[tuple] = []
        self._order = None
        self._limit = None
        self._insert = None

    def select(self, *columns: str) -> "FakeQuery":
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, count: int) -> "FakeQuery":
        self._limit = count
        return self

    def insert(self, row: Dict[str, Any]) -> "FakeQuery":
        self._insert = row
        return self

    def execute(self) -> SimpleNamespace:
        if self._insert is not None:
            return SimpleNamespace(data=[self.db.insert(self.table, self._insert)])
        self.db.reads += 1
        rows = [
            dict(r) for r in self.db.rows[self.table]
            if all(r.get(c) == v for c, v in self._filters)
        ]
        if self._order:
            column, desc = self._order
            rows.sort(key=lambda r: r[column], reverse=desc)
        if self._limit is not None:
            rows = rows[: self._limit]
        return SimpleNamespace(data=rows)


class FakeBucket:
    def __init__(self, db: "FakeSupabase", bucket: str) -> None:
        self.db = db
        self.bucket = bucket

    @property
    def objects(self) -> Dict[str, bytes]:
        return self.db.objects.setdefault(self.bucket, {})

    def upload(self, path: str, file: bytes, file_options: Dict[str, str]) -> SimpleNamespace:
        self.db.uploads.append((self.bucket, path, file_options))
        if path in self.objects and file_options.get("upsert") != "true":
            raise StorageApiError("The resource already exists", "Duplicate", 409)
        self.objects[path] = file
        return SimpleNamespace(path=path, full_path=f"{self.bucket}/{path}")

    def remove(self, paths: List[str]) -> List[Dict[str, str]]:
        removed = []
        for path in paths:
            if self.objects.pop(path, None) is not None:
                removed.append({"name": path})
        return removed

    def list(self, folder: str, options: Dict[str, int]) -> List[Dict[str, str]]:
        prefix = f"{folder}/" if folder else ""
        names = sorted(p[len(prefix):] for p in self.objects if p.startswith(prefix))
        start = options.get("offset", 0)
        return [{"name": n} for n in names[start:start + options.get("limit", 100)]]

    def get_public_url(self, path: str) -> str:
        return f"https://test-project.supabase.co/storage/v1/object/public/{self.bucket}/{path}"


class FakeStorage:
    def __init__(self, db: "FakeSupabase") -> None:
        self.db = db

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self.db, bucket)


class FakeSupabase:
    def __init__(self) -> None:
        self.rows: Dict[str, List[Dict[str, Any]]] = {"profiles": [], "messages": []}
        self.objects: Dict[str, Dict[str, bytes]] = {}
        self.uploads: List[tuple] = []
        self.writes = 0
        self.reads = 0
        self._tick = 0
        self.storage = FakeStorage(self)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def _next_timestamp(self) -> str:
        self._tick += 1
        return (BASE_TIME + timedelta(seconds=self._tick)).isoformat()

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        for column in UNIQUE_COLUMNS.get(table, []):
            if any(r[column] == row[column] for r in self.rows[table]):
                raise APIError({
                    "code": "23505",
                    "message": f'duplicate key value violates unique constraint "{table}_{column}_key"',
                    "details": None,
                    "hint": None,
                })
        self.writes += 1
        stored = dict(row)
        stored.setdefault("id", str(uuid4()))
        stored.setdefault(STORE_TIMESTAMPS[table], self._next_timestamp())
        self.rows[table].append(stored)
        return dict(stored)


@pytest.fixture
def supabase() -> FakeSupabase:
    return FakeSupabase()
