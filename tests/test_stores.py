from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
import requests

from jumpkit.config import SupabaseConfig
from jumpkit.domain.models import JumpRecord
from jumpkit.infra import supabase_store
from jumpkit.infra.jsonl_store import JsonlJumpStore
from jumpkit.infra.memory_store import InMemoryJumpStore
from jumpkit.infra.supabase_store import SupabaseJumpStore
from jumpkit.naming import JumpNamer


def _write_jsonl(path: Path, items: list) -> None:
    path.write_text("\n".join(json.dumps(item) for item in items) + "\n", encoding="utf-8")


def _record(record_id: str, user_id: str, day: int) -> JumpRecord:
    return JumpRecord(id=record_id, user_id=user_id, created_at=datetime(2025, 1, day, tzinfo=timezone.utc))


class _FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


def test_memory_store_orders_newest_first() -> None:
    store = InMemoryJumpStore([_record("a", "u1", 1), _record("b", "u1", 3), _record("c", "u2", 2)])
    assert [record.id for record in store.list_jumps("u1")] == ["b", "a"]


def test_jsonl_store_reads_and_dedupes(tmp_path: Path) -> None:
    path = tmp_path / "jumps.jsonl"
    records = [_record("a", "u1", 1), _record("b", "u1", 2), _record("a", "u1", 5), _record("c", "u2", 3)]
    _write_jsonl(path, [record.model_dump(mode="json") for record in records])
    store = JsonlJumpStore(path=path)
    assert [record.id for record in store.list_jumps("u1")] == ["b", "a"]
    assert [record.id for record in store.list_jumps("u2")] == ["c"]


def test_jsonl_store_add_appends(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "jumps.jsonl"
    store = JsonlJumpStore(path=path)
    store.add(_record("a", "u1", 1))
    store.add(_record("b", "u1", 2))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["id"] for line in lines] == ["a", "b"]
    assert JumpNamer(store=store).get_next_jump_number("u1") == 3


def test_jsonl_store_missing_file(tmp_path: Path) -> None:
    store = JsonlJumpStore(path=tmp_path / "missing.jsonl")
    with pytest.raises(FileNotFoundError):
        store.list_jumps("u1")
    assert JumpNamer(store=store).get_next_jump_number("u1") == 1


def test_supabase_store_queries_user_jumps(monkeypatch) -> None:
    calls = []

    def fake_get(url, headers, params, timeout):
        calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        return _FakeResponse(
            [
                {"id": "j2", "user_id": "u1", "created_at": "2025-01-02T00:00:00+00:00", "title": "Jump #2: X"},
                {"id": "j1", "user_id": "u1", "created_at": "2025-01-01T00:00:00+00:00", "title": None},
            ]
        )

    monkeypatch.setattr(supabase_store.requests, "get", fake_get)
    store = SupabaseJumpStore(config=SupabaseConfig(url="https://example.supabase.co/", api_key="secret"))
    records = store.list_jumps("u1")

    assert [record.id for record in records] == ["j2", "j1"]
    assert calls[0]["url"] == "https://example.supabase.co/rest/v1/user_jumps"
    assert calls[0]["params"]["user_id"] == "eq.u1"
    assert calls[0]["params"]["order"] == "created_at.desc"
    assert calls[0]["headers"]["Authorization"] == "Bearer secret"
    assert calls[0]["timeout"] == 10.0
    assert JumpNamer(store=store).get_next_jump_number("u1") == 3


def test_supabase_store_http_error_falls_back(monkeypatch) -> None:
    monkeypatch.setattr(supabase_store.requests, "get", lambda *args, **kwargs: _FakeResponse({}, status_code=503))
    store = SupabaseJumpStore(config=SupabaseConfig(url="https://example.supabase.co", api_key="secret"))
    with pytest.raises(requests.HTTPError):
        store.list_jumps("u1")
    assert JumpNamer(store=store).get_next_jump_number("u1") == 1


def test_jsonl_store_mixes_naive_and_aware_timestamps(tmp_path: Path) -> None:
    path = tmp_path / "jumps.jsonl"
    _write_jsonl(
        path,
        [
            {"id": "a", "user_id": "u1", "created_at": "2025-01-01T00:00:00"},
            {"id": "b", "user_id": "u1", "created_at": "2025-01-02T00:00:00+00:00"},
        ],
    )
    store = JsonlJumpStore(path=path)
    records = store.list_jumps("u1")
    assert [record.id for record in records] == ["b", "a"]
    assert records[1].created_at.tzinfo is not None
    assert JumpNamer(store=store).get_next_jump_number("u1") == 3


def test_jump_record_attaches_utc_to_naive_timestamp() -> None:
    record = JumpRecord(id="a", user_id="u1", created_at=datetime(2025, 1, 1))
    assert record.created_at == datetime(2025, 1, 1, tzinfo=timezone.utc)
