"""Keyword rule tables used to name Jumps."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from jumpkit.yaml_utils import load_yaml


class KeywordRule(BaseModel):
    label: str
    keywords: List[str] = Field(min_length=1)

    def matches(self, text_lower: str) -> bool:
        return any(keyword in text_lower for keyword in self.keywords)

    @field_validator("keywords")
    @classmethod
    def lower_keywords(cls, value: List[str]) -> List[str]:
        keywords = [keyword.strip().lower() for keyword in value if keyword.strip()]
        if not keywords:
            raise ValueError("keywords must contain at least one non-blank entry")
        return keywords


class RuleTable(BaseModel):
    version: int = 1
    objectives: List[KeywordRule]
    challenges: List[KeywordRule]

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only rule table version 1 is supported")
        return value


def first_match(rules: Sequence[KeywordRule], text: str) -> Optional[str]:
    """Label of the first rule, in table order, with a keyword inside ``text``."""
    text_lower = text.lower()
    for rule in rules:
        if rule.matches(text_lower):
            return rule.label
    return None


def _rules(pairs: Iterable[tuple]) -> List[KeywordRule]:
    return [KeywordRule(label=label, keywords=list(keywords)) for keywords, label in pairs]


OBJECTIVE_RULES: List[KeywordRule] = _rules(
    [
        (("automate", "automation", "streamline", "efficiency"), "Automation Excellence"),
        (("revenue", "sales", "profit", "monetize", "income"), "Revenue Revolution"),
        (("customer", "client", "support", "service experience"), "Customer Experience Excellence"),
        (("marketing", "campaign", "brand", "content", "social media"), "Marketing Revolution"),
        (("data", "analytics", "insight", "reporting", "dashboard"), "Data Intelligence Revolution"),
        (("scale", "scaling", "grow", "expand"), "Growth Acceleration"),
        (("innovate", "innovation", "transform", "digital"), "Digital Transformation"),
        (("productivity", "team", "collaboration", "workflow"), "Productivity Excellence"),
        (("learn", "skill", "training", "upskill", "educate"), "AI Mastery Journey"),
        (("cost", "save", "saving", "budget", "expense"), "Cost Optimization Excellence"),
    ]
)

CHALLENGE_RULES: List[KeywordRule] = _rules(
    [
        (("time", "hours", "manual", "busy", "repetitive"), "Time Optimization"),
        (("cost", "expensive", "budget", "spend"), "Cost Reduction"),
        (("quality", "error", "mistake", "accuracy", "consistency"), "Quality Enhancement"),
        (("speed", "slow", "fast", "delay", "bottleneck"), "Speed Acceleration"),
        (("competition", "competitor", "competitive", "market share"), "Competitive Advantage"),
        (("skill", "knowledge", "expertise", "talent", "training"), "Skill Development"),
    ]
)

DEFAULT_RULE_TABLE = RuleTable(objectives=OBJECTIVE_RULES, challenges=CHALLENGE_RULES)


def load_rule_table(path: str) -> RuleTable:
    payload = load_yaml(path)
    return RuleTable(**payload)
