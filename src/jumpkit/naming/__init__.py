"""Rule-based naming of generated Jump plans."""

from jumpkit.naming.keywords import extract_keywords, meaningful_words
from jumpkit.naming.namer import (
    FALLBACK_NAME,
    JumpNamer,
    generate_full_jump_title,
    generate_jump_name,
    identify_challenge_focus,
    identify_core_objective,
)
from jumpkit.naming.rules import DEFAULT_RULE_TABLE, KeywordRule, RuleTable, first_match, load_rule_table

__all__ = [
    "DEFAULT_RULE_TABLE",
    "FALLBACK_NAME",
    "JumpNamer",
    "KeywordRule",
    "RuleTable",
    "extract_keywords",
    "first_match",
    "generate_full_jump_title",
    "generate_jump_name",
    "identify_challenge_focus",
    "identify_core_objective",
    "load_rule_table",
    "meaningful_words",
]
