"""
Tests for the Schema Registry.
"""

import pytest

from progrelig.schema import (
    FIELDS,
    LANG_PATTERNS,
    MULTI_VALUED_FIELDS,
    NUMERIC_FIELDS,
    OTHER_NUMS,
    RELIGIONS,
    STATEMENTS,
    is_multi_valued,
    is_numeric,
    is_statement,
    question_text,
    short_key,
)


def test_field_inventory():
    assert len(FIELDS) == 21
    assert len(STATEMENTS) == 13
    assert OTHER_NUMS == ("progyears", "workyears")
    assert NUMERIC_FIELDS == STATEMENTS + OTHER_NUMS
    assert MULTI_VALUED_FIELDS == ("beliefs", "worklangs")


def test_question_text_lookup():
    assert question_text("humangood") == "Human beings are basically or inherently good"
    assert question_text("feedback") == "Feedback"
    with pytest.raises(KeyError):
        question_text("nosuchkey")


def test_short_key_accepts_key_or_question():
    assert short_key("favlang") == "favlang"
    assert short_key("What is your favorite programming language?") == "favlang"
    assert short_key("Timestamp") is None


def test_membership_helpers():
    assert is_multi_valued(FIELDS["beliefs"])
    assert not is_multi_valued("favlang")
    assert is_statement("naturcrea")
    assert not is_statement("progyears")
    assert is_numeric("progyears")
    assert not is_numeric("feedback")


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        FIELDS["extra"] = "Extra question"
    with pytest.raises(AttributeError):
        RELIGIONS.add("Sikh")


def test_language_patterns_keep_declaration_order():
    tags = [tag for _, tag in LANG_PATTERNS]
    assert tags == ["c++", "objective-c", "go", "python", "c#"]
