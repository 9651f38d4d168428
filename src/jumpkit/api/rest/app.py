"""REST API adapter."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jumpkit.domain.models import JumpFormInputs
from jumpkit.server.wire import ServiceBundle


class FormatRequest(BaseModel):
    text: str = ""


class NameRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    inputs: JumpFormInputs = Field(default_factory=JumpFormInputs)
    user_id: Optional[str] = None


def create_app(services: ServiceBundle) -> FastAPI:
    app = FastAPI(title="JumpKit Server (REST)")

    @app.get("/healthz")
    def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/format")
    def format_text(payload: FormatRequest) -> Dict[str, Any]:
        return {"markdown": services.format_document(payload.text)}

    @app.post("/jumps/name")
    def name_jump(payload: NameRequest) -> Dict[str, Any]:
        result = services.name_jump(payload.inputs, user_id=payload.user_id)
        return result.model_dump(by_alias=True)

    return app
