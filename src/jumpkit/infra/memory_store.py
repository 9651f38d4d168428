"""In-memory Jump store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from jumpkit.domain.models import JumpRecord
from jumpkit.domain.ports import JumpStorePort


@dataclass
class InMemoryJumpStore(JumpStorePort):
    records: List[JumpRecord] = field(default_factory=list)

    def list_jumps(self, user_id: str) -> List[JumpRecord]:
        owned = [record for record in self.records if record.user_id == user_id]
        return sorted(owned, key=lambda record: record.created_at, reverse=True)

    def add(self, record: JumpRecord) -> None:
        self.records.append(record)
