"""
Tests for response predicates.
"""

import pytest

from progrelig.csv_parser import normalize
from progrelig.examples import make_raw_row
from progrelig.model import NormalizedRecord
from progrelig.predicates import is_religious, leanings, make_has_opinion


class TestIsReligious:

    @pytest.mark.parametrize("beliefs", [
        ("Christian",),
        ("Christian", "Liberal"),
        ("Atheist", "Hindu"),
        ("Pagan",),
    ])
    def test_any_religion_counts(self, beliefs):
        assert is_religious(NormalizedRecord(beliefs=beliefs))

    @pytest.mark.parametrize("beliefs", [
        ("Atheist",),
        ("Agnostic", "Liberal"),
        ("christian",),
        (" Christian",),
        ("",),
        (),
    ])
    def test_exact_membership_only(self, beliefs):
        assert not is_religious(NormalizedRecord(beliefs=beliefs))


class TestHasOpinion:

    @pytest.mark.parametrize("raw,expected", [
        ("4", True),
        ("1", True),
        ("0", False),
        ("", False),
        ("n/a", False),
    ])
    def test_opinion_from_raw_value(self, raw, expected):
        record = normalize(make_raw_row("", humangood=raw))
        assert make_has_opinion("humangood")(record) is expected

    def test_accepts_question_text(self):
        record = NormalizedRecord(statements={"humangood": 5})
        has_opinion = make_has_opinion("Human beings are basically or inherently good")
        assert has_opinion(record)


def test_leanings_keep_order():
    record = NormalizedRecord(beliefs=("Moderate", "Christian", "Liberal", " Conservative"))
    assert leanings(record) == ("Moderate", "Liberal")
