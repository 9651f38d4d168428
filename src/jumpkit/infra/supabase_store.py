"""Jump store reading the ``user_jumps`` table over the PostgREST API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import requests

from jumpkit.config import SupabaseConfig
from jumpkit.domain.models import JumpRecord
from jumpkit.domain.ports import JumpStorePort

logger = logging.getLogger(__name__)


@dataclass
class SupabaseJumpStore(JumpStorePort):
    config: SupabaseConfig

    def list_jumps(self, user_id: str) -> List[JumpRecord]:
        response = requests.get(
            f"{self.config.url.rstrip('/')}/rest/v1/{self.config.table}",
            headers={
                "apikey": self.config.api_key,
                "Authorization": f"Bearer {self.config.api_key}",
                "Accept": "application/json",
            },
            params={
                "select": "id,user_id,created_at,title",
                "user_id": f"eq.{user_id}",
                "order": "created_at.desc",
            },
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        rows = response.json()
        logger.debug("Fetched %d jumps for user %s", len(rows), user_id)
        return [JumpRecord(**row) for row in rows]
