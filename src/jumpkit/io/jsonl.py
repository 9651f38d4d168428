"""JSONL writers."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


def append_jsonl(path: Path, item: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(item.model_dump_json())
        handle.write("\n")
