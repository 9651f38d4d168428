import logging

import pytest

from jumpkit.domain.models import JumpFormInputs, JumpNameResult, JumpRecord
from jumpkit.infra.memory_store import InMemoryJumpStore
from jumpkit.naming import (
    JumpNamer,
    extract_keywords,
    meaningful_words,
    generate_full_jump_title,
    generate_jump_name,
    identify_challenge_focus,
    identify_core_objective,
)


class _BrokenStore:
    def list_jumps(self, user_id):
        raise RuntimeError("connection refused")


def _store_with(*user_ids: str) -> InMemoryJumpStore:
    store = InMemoryJumpStore()
    for index, user_id in enumerate(user_ids):
        store.add(JumpRecord(id=f"jump-{index}", user_id=user_id))
    return store


def test_identify_core_objective_first_match_wins():
    assert identify_core_objective("we want to automate our support workflow") == "Automation Excellence"
    assert identify_core_objective("Boost our revenue via partnerships") == "Revenue Revolution"
    assert identify_core_objective("increase sales with better customer support") == "Revenue Revolution"


def test_identify_core_objective_keyword_fallback():
    assert identify_core_objective("Launch a podcast") == "Launch Revolution"


def test_identify_core_objective_none():
    assert identify_core_objective("") is None
    assert identify_core_objective("   ") is None
    assert identify_core_objective("to be or 42") is None


def test_identify_challenge_focus():
    assert identify_challenge_focus("Too much manual data entry") == "Time Optimization"
    assert identify_challenge_focus("our tools are expensive") == "Cost Reduction"
    assert identify_challenge_focus("weather") is None
    assert identify_challenge_focus("") is None


def test_extract_keywords_filters_stopwords_and_numbers():
    assert extract_keywords("We need to build 3 new AI-powered apps in 2025", 3) == ["build", "new", "powered"]
    assert extract_keywords("", 2) == []


def test_extract_keywords_puts_business_terms_first():
    assert extract_keywords("improve website marketing", 2) == ["marketing", "improve"]
    assert extract_keywords("better customer analytics tools", 2) == ["customer", "analytics"]
    assert extract_keywords("improve our website marketing", 1) == ["improve"]


def test_meaningful_words_keep_order():
    assert meaningful_words("improve our website marketing") == ["improve", "website", "marketing"]
    assert meaningful_words("   ") == []


def test_objective_fallback_uses_first_meaningful_word():
    assert identify_core_objective("Launch a tech podcast") == "Launch Revolution"


def test_generate_jump_name_fallback():
    inputs = JumpFormInputs(goals="", industry="", challenges="")
    assert generate_jump_name(inputs) == "Ai Innovation Journey"


def test_generate_jump_name_appends_industry():
    inputs = JumpFormInputs(goals="automate reporting", industry="Healthcare")
    assert generate_jump_name(inputs) == "Automation Excellence In Healthcare"


def test_generate_jump_name_skips_industry_already_named():
    inputs = JumpFormInputs(goals="improve our marketing", industry="marketing")
    assert generate_jump_name(inputs) == "Marketing Revolution"


def test_generate_jump_name_softens_for_beginners():
    assert generate_jump_name(JumpFormInputs(goals="grow revenue", experience_level="Beginner")) == "Revenue Journey"
    assert (
        generate_jump_name(JumpFormInputs(goals="automate", experience_level="complete novice"))
        == "Automation Transformation"
    )


def test_generate_jump_name_challenge_fallback():
    inputs = JumpFormInputs(goals="", challenges="we lose deals to competitors")
    assert generate_jump_name(inputs) == "Competitive Advantage Transformation"
    assert generate_jump_name(JumpFormInputs(goals="?!")) == "Ai Innovation Journey"


def test_generate_jump_name_truncates():
    inputs = JumpFormInputs(goals="automate", industry="International Logistics And Freight Forwarding")
    assert generate_jump_name(inputs) == "Automation Excellence In International Logistics A"
    cut_on_space = JumpFormInputs(goals="automate", industry="International Freight Co Ltd")
    assert generate_jump_name(cut_on_space) == "Automation Excellence In International Freight Co "


def test_get_next_jump_number_counts_user_records():
    namer = JumpNamer(store=_store_with("u1", "u1", "u2"))
    assert namer.get_next_jump_number("u1") == 3
    assert namer.get_next_jump_number("u1") == 3
    assert namer.get_next_jump_number("u3") == 1


def test_get_next_jump_number_falls_back_on_failure(caplog):
    namer = JumpNamer(store=_BrokenStore())
    with caplog.at_level(logging.WARNING):
        assert namer.get_next_jump_number("u1") == 1
    assert "connection refused" in caplog.text


def test_get_next_jump_number_without_store():
    assert JumpNamer().get_next_jump_number("u1") == 1


def test_generate_full_jump_title_first_jump():
    namer = JumpNamer(store=InMemoryJumpStore())
    result = namer.generate_full_jump_title(JumpFormInputs(goals="automate tasks"), "user-1")
    assert result.full_title == "Jump #1: Automation Excellence"
    assert result.number == 1
    assert result.name == "Automation Excellence"


def test_generate_full_jump_title_numbers_after_existing():
    namer = JumpNamer(store=_store_with("user-1", "user-1"))
    result = namer.generate_full_jump_title(JumpFormInputs(goals="automate tasks"), "user-1")
    assert result.full_title == "Jump #3: Automation Excellence"
    assert namer.generate_full_jump_title(JumpFormInputs(goals="automate tasks")).number == 1


def test_module_level_full_title_defaults_to_one():
    assert generate_full_jump_title(JumpFormInputs()).full_title == "Jump #1: Ai Innovation Journey"


def test_jump_name_result_invariant():
    with pytest.raises(ValueError):
        JumpNameResult(name="X", number=2, full_title="Jump #1: X")
    with pytest.raises(ValueError):
        JumpNameResult.compose(name="X", number=0)


def test_camel_case_payloads():
    inputs = JumpFormInputs.model_validate({"goals": "automate", "experienceLevel": "beginner"})
    assert inputs.experience_level == "beginner"
    dumped = JumpNameResult.compose(name="X", number=1).model_dump(by_alias=True)
    assert dumped == {"name": "X", "number": 1, "fullTitle": "Jump #1: X"}
