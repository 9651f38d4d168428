"""Rule-based Jump naming and numbering."""

from __future__ import annotations

import logging
from typing import Optional

from jumpkit.domain.models import JumpFormInputs, JumpNameResult
from jumpkit.domain.ports import JumpStorePort
from jumpkit.naming.keywords import meaningful_words
from jumpkit.naming.rules import DEFAULT_RULE_TABLE, RuleTable, first_match
from jumpkit.normalize import normalize_light

logger = logging.getLogger(__name__)

FALLBACK_NAME = "AI Innovation Journey"
DEFAULT_MAX_LENGTH = 50

_BEGINNER_MARKERS = ("beginner", "novice")
_SOFTER_WORDING = (("Revolution", "Journey"), ("Excellence", "Transformation"))


class JumpNamer:
    """Derives display names and sequence numbers for generated plans.

    Every method is total: empty or odd inputs produce a generic name and a
    failing record store produces number 1.
    """

    def __init__(
        self,
        store: Optional[JumpStorePort] = None,
        rules: RuleTable = DEFAULT_RULE_TABLE,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self.store = store
        self.rules = rules
        self.max_length = max_length

    def identify_core_objective(self, goals: str) -> Optional[str]:
        if not goals or not goals.strip():
            return None
        label = first_match(self.rules.objectives, goals)
        if label:
            return label
        keywords = meaningful_words(goals)
        if not keywords:
            return None
        return f"{keywords[0].capitalize()} Revolution"

    def identify_challenge_focus(self, challenges: str) -> Optional[str]:
        if not challenges or not challenges.strip():
            return None
        return first_match(self.rules.challenges, challenges)

    def generate_jump_name(self, inputs: JumpFormInputs) -> str:
        objective = self.identify_core_objective(inputs.goals)
        if objective:
            name = objective
            if _is_beginner(inputs.experience_level):
                for harsh, soft in _SOFTER_WORDING:
                    name = name.replace(harsh, soft)
            industry = normalize_light(inputs.industry)
            if industry and industry.lower() not in name.lower():
                name = f"{name} in {industry}"
        else:
            focus = self.identify_challenge_focus(inputs.challenges)
            name = f"{focus} Transformation" if focus else FALLBACK_NAME
        return self.format_jump_name(name)

    def format_jump_name(self, name: str) -> str:
        words = name.strip().split(" ")
        titled = " ".join(word[:1].upper() + word[1:].lower() for word in words)
        return titled[: self.max_length]

    def get_next_jump_number(self, user_id: str) -> int:
        if self.store is None:
            return 1
        try:
            jumps = self.store.list_jumps(user_id)
        except Exception as exc:
            logger.warning("Failed to count jumps for user %s: %s", user_id, exc)
            return 1
        return len(jumps) + 1

    def generate_full_jump_title(
        self,
        inputs: JumpFormInputs,
        user_id: Optional[str] = None,
    ) -> JumpNameResult:
        name = self.generate_jump_name(inputs)
        number = self.get_next_jump_number(user_id) if user_id else 1
        return JumpNameResult.compose(name=name, number=number)


def _is_beginner(experience_level: str) -> bool:
    level = (experience_level or "").lower()
    return any(marker in level for marker in _BEGINNER_MARKERS)


_DEFAULT_NAMER = JumpNamer()


def generate_jump_name(inputs: JumpFormInputs) -> str:
    return _DEFAULT_NAMER.generate_jump_name(inputs)


def generate_full_jump_title(inputs: JumpFormInputs, user_id: Optional[str] = None) -> JumpNameResult:
    return _DEFAULT_NAMER.generate_full_jump_title(inputs, user_id)


def identify_core_objective(goals: str) -> Optional[str]:
    return _DEFAULT_NAMER.identify_core_objective(goals)


def identify_challenge_focus(challenges: str) -> Optional[str]:
    return _DEFAULT_NAMER.identify_challenge_focus(challenges)
