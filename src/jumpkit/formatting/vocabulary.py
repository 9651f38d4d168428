"""Word lists driving the Markdown formatter."""

from __future__ import annotations

from typing import List

LABELS: List[str] = [
    "goal",
    "goals",
    "objective",
    "objectives",
    "kpi",
    "kpis",
    "metrics",
    "milestones",
    "timeline",
    "resources",
    "risks",
    "deliverables",
    "outcomes",
    "success criteria",
    "tools",
    "budget",
    "roi",
    "owner",
    "priority",
    "actions",
    "next steps",
]

SECTION_TERMS: List[str] = [
    "executive summary",
    "overview",
    "introduction",
    "summary",
    "conclusion",
    "key recommendations",
    "recommendations",
    "key takeaways",
    "situation analysis",
    "strategic vision",
    "implementation plan",
    "action plan",
    "risk assessment",
    "success metrics",
    "roadmap",
]

EMPHASIS_WORDS: List[str] = [
    "important",
    "critical",
    "essential",
    "crucial",
    "strategic",
    "significant",
    "vital",
    "fundamental",
]

ACTION_VERBS: List[str] = [
    "implement",
    "execute",
    "analyze",
    "optimize",
    "launch",
    "develop",
    "measure",
    "automate",
    "deploy",
    "integrate",
    "prioritize",
    "evaluate",
    "establish",
    "track",
]

COUNT_UNITS: List[str] = [
    "users",
    "customers",
    "clients",
    "leads",
    "employees",
    "subscribers",
    "visitors",
    "conversions",
    "sales",
]

TIME_UNITS: List[str] = ["days", "weeks", "months", "quarters", "years", "hours"]

SECTION_LABELS: List[str] = ["success criteria", "key risks", "risks", "action items"]


def alternation(words: List[str]) -> str:
    """Regex alternation with longer entries first so prefixes never shadow them."""
    ordered = sorted(words, key=len, reverse=True)
    return "|".join(word.replace(" ", r"[ \t]+") for word in ordered)
