"""JSONL-backed Jump store."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from jumpkit.domain.models import JumpRecord
from jumpkit.domain.ports import JumpStorePort
from jumpkit.io.jsonl import append_jsonl


@dataclass
class JsonlJumpStore(JumpStorePort):
    """Jump records kept one per line in a JSONL file.

    The file is re-read on every call so that records appended by other
    processes are counted.
    """

    path: Path

    def list_jumps(self, user_id: str) -> List[JumpRecord]:
        owned = [record for record in self._load().values() if record.user_id == user_id]
        return sorted(owned, key=lambda record: record.created_at, reverse=True)

    def add(self, record: JumpRecord) -> None:
        append_jsonl(Path(self.path), record)

    def _load(self) -> Dict[str, JumpRecord]:
        path = Path(self.path)
        if not path.exists():
            raise FileNotFoundError(f"Jumps JSONL not found: {path}")
        by_id: Dict[str, JumpRecord] = {}
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                payload = line.strip()
                if not payload:
                    continue
                record = JumpRecord(**json.loads(payload))
                if record.id in by_id:
                    continue
                by_id[record.id] = record
        return by_id
