"""Record Jump use-case."""

from __future__ import annotations

import uuid

from jumpkit.domain.models import JumpNameResult, JumpRecord
from jumpkit.domain.ports import WritableJumpStorePort


def record_jump(store: WritableJumpStorePort, user_id: str, result: JumpNameResult) -> JumpRecord:
    record = JumpRecord(id=str(uuid.uuid4()), user_id=user_id, title=result.full_title)
    store.add(record)
    return record
