"""Composition root for JumpKit services."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jumpkit.config import FormatterConfig, JumpkitConfig, StoreConfig
from jumpkit.domain.models import JumpFormInputs, JumpNameResult, JumpRecord
from jumpkit.domain.ports import JumpStorePort
from jumpkit.infra.jsonl_store import JsonlJumpStore
from jumpkit.infra.memory_store import InMemoryJumpStore
from jumpkit.infra.supabase_store import SupabaseJumpStore
from jumpkit.naming import DEFAULT_RULE_TABLE, JumpNamer, load_rule_table
from jumpkit.paths import resolve_config_path
from jumpkit.usecases.format_document import format_document
from jumpkit.usecases.name_jump import name_jump
from jumpkit.usecases.record_jump import record_jump


@dataclass
class ServiceBundle:
    store: JumpStorePort
    namer: JumpNamer
    formatter: FormatterConfig

    def format_document(self, text: str) -> str:
        return format_document(text, config=self.formatter)

    def name_jump(self, inputs: JumpFormInputs, *, user_id: Optional[str] = None) -> JumpNameResult:
        return name_jump(self.namer, inputs, user_id=user_id)

    def record_jump(self, user_id: str, result: JumpNameResult) -> JumpRecord:
        if not hasattr(self.store, "add"):
            raise ValueError(f"{type(self.store).__name__} is read-only")
        return record_jump(self.store, user_id, result)


def build_store(config: StoreConfig, config_path: Optional[Path] = None) -> JumpStorePort:
    if config.type == "jsonl":
        path = Path(config.path)
        if config_path is not None:
            path = resolve_config_path(config_path, config.path)
        return JsonlJumpStore(path=path)
    if config.type == "supabase":
        return SupabaseJumpStore(config=config.supabase)
    return InMemoryJumpStore()


def build_services(config: Optional[JumpkitConfig] = None, config_path: Optional[Path] = None) -> ServiceBundle:
    cfg = config or JumpkitConfig()
    store = build_store(cfg.store, config_path)
    rules = DEFAULT_RULE_TABLE
    if cfg.naming.rules_path:
        rules_path = Path(cfg.naming.rules_path)
        if config_path is not None:
            rules_path = resolve_config_path(config_path, cfg.naming.rules_path)
        rules = load_rule_table(str(rules_path))
    namer = JumpNamer(store=store, rules=rules, max_length=cfg.naming.max_length)
    return ServiceBundle(store=store, namer=namer, formatter=cfg.formatter)
