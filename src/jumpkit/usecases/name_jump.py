"""Name Jump use-case."""

from __future__ import annotations

from typing import Optional

from jumpkit.domain.models import JumpFormInputs, JumpNameResult
from jumpkit.naming import JumpNamer


def name_jump(
    namer: JumpNamer,
    inputs: JumpFormInputs,
    *,
    user_id: Optional[str] = None,
) -> JumpNameResult:
    return namer.generate_full_jump_title(inputs, user_id=user_id)
