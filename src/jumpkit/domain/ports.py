"""Ports (interfaces) for Jump naming."""

from __future__ import annotations

from typing import List, Protocol

from jumpkit.domain.models import JumpRecord


class JumpStorePort(Protocol):
    def list_jumps(self, user_id: str) -> List[JumpRecord]:
        """Records owned by ``user_id``, newest first."""
        ...


class WritableJumpStorePort(JumpStorePort, Protocol):
    def add(self, record: JumpRecord) -> None:
        ...
