"""
Tests for the CSV parser (Layer 1: Raw Export → Typed Respondent Table).

We need to:
1. Split multi-valued answers without trimming
2. Coerce numeric answers (blank = 0, garbage = None)
3. Parse the fixed-format timestamps
4. Normalize favorite language spellings in pattern order
5. Degrade silently on malformed values, fail only on unreadable files
"""

import logging
import warnings
from datetime import datetime

import pytest

from progrelig.csv_parser import (
    LoadError,
    load_raw_rows,
    load_responses,
    normalize,
    parse_csv_string,
    parse_lang,
    parse_list,
    parse_number,
    parse_raw_rows,
    parse_timestamp,
)
from progrelig.examples import build_example_csv, make_raw_row
from progrelig.schema import FIELDS, STATEMENTS, is_multi_valued, is_numeric


class TestParseList:

    def test_single_item(self):
        assert parse_list("Christian") == ("Christian",)

    def test_semicolon_and_comma(self):
        assert parse_list("Christian;Liberal") == ("Christian", "Liberal")
        assert parse_list("Go,Python;C") == ("Go", "Python", "C")

    def test_no_trimming(self):
        """Whitespace around items is kept as exported."""
        assert parse_list("Atheist, Liberal") == ("Atheist", " Liberal")

    def test_empty(self):
        assert parse_list("") == ("",)


class TestParseNumber:

    @pytest.mark.parametrize("raw,expected", [
        ("4", 4),
        ("0", 0),
        ("", 0),
        ("   ", 0),
        (" 3 ", 3),
        ("2.5", 2.5),
    ])
    def test_numbers(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw,expected", [
        ("+4", 4),
        ("-1", -1),
        (".5", 0.5),
        ("4.", 4),
        ("1e3", 1000),
    ])
    def test_decimal_spellings(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [
        "n/a", "five", "nan", "inf", "Infinity", "4 years", "1_000", "1e400",
    ])
    def test_garbage_is_none(self, raw):
        assert parse_number(raw) is None


class TestParseTimestamp:

    def test_morning(self):
        assert parse_timestamp("2014/04/25 11:44:09 AM AST") == datetime(2014, 4, 25, 11, 44, 9)

    def test_afternoon(self):
        assert parse_timestamp("2014/04/25 01:05:00 PM AST") == datetime(2014, 4, 25, 13, 5)

    def test_noon(self):
        assert parse_timestamp("2014/04/25 12:10:00 PM AST") == datetime(2014, 4, 25, 12, 10)

    @pytest.mark.parametrize("raw", ["", "not a date", "2014-04-25 11:44:09", "2014/04/25 11:44:09 AM EST"])
    def test_unparseable_is_none(self, raw):
        assert parse_timestamp(raw) is None

    def test_other_zone_label(self):
        assert parse_timestamp("2014/04/25 11:44:09 AM EST", zone="EST") == datetime(2014, 4, 25, 11, 44, 9)


class TestParseLang:

    @pytest.mark.parametrize("raw,expected", [
        ("Golang", "go"),
        ("Go", "go"),
        ("Python 3", "python"),
        ("  C++11", "c++"),
        ("Ruby", "ruby"),
        ("Objective-C", "objective-c"),
        ("C#", "c#"),
        (".NET", "c#"),
        ("  Haskell ", "haskell"),
        ("", ""),
    ])
    def test_aliases(self, raw, expected):
        assert parse_lang(raw) == expected

    def test_first_pattern_wins(self):
        """c++ is declared before python, so it shadows it."""
        assert parse_lang("C++ and Python") == "c++"


class TestNormalize:

    def test_typed_record(self):
        raw = make_raw_row(
            "2014/04/25 11:44:09 AM AST", "Christian;Liberal", "Golang",
            humangood="4", worklangs="Go,Python", progyears="12", workyears="",
            feedback="Nice survey",
        )
        record = normalize(raw)

        assert record.timestamp == datetime(2014, 4, 25, 11, 44, 9)
        assert record.beliefs == ("Christian", "Liberal")
        assert record.worklangs == ("Go", "Python")
        assert record.favlang == "go"
        assert record.value("humangood") == 4
        assert record.value("suffersin") == 0
        assert record.progyears == 12
        assert record.workyears == 0
        assert record.feedback == "Nice survey"

    def test_every_statement_is_numeric(self):
        record = normalize(make_raw_row("2014/04/25 11:44:09 AM AST", humangood="x"))
        assert set(record.statements) == set(STATEMENTS)
        assert record.value("humangood") is None
        assert all(record.value(k) == 0 for k in STATEMENTS if k != "humangood")

    def test_input_is_not_mutated(self):
        raw = make_raw_row("2014/04/25 11:44:09 AM AST", "Christian;Liberal", "Go", humangood="4")
        before = dict(raw)
        normalize(raw)
        assert raw == before

    def test_parsing_follows_schema_membership(self):
        raw = make_raw_row(
            "2014/04/25 11:44:09 AM AST", "Christian;Liberal", "Go",
            churchatt="Weekly; sometimes more", maxeducat="Bachelor's, CS",
            worklangs="Java;Go", workyears="3", humancrea="2",
        )
        record = normalize(raw)

        for key in FIELDS:
            if is_multi_valued(key):
                assert isinstance(getattr(record, key), tuple)
            elif is_numeric(key):
                assert isinstance(record.value(key), (int, float))
        # single-valued text keeps its delimiters
        assert record.churchatt == "Weekly; sometimes more"
        assert record.maxeducat == "Bachelor's, CS"
        assert record.worklangs == ("Java", "Go")
        assert record.workyears == 3
        assert record.value("humancrea") == 2

    def test_missing_columns_degrade(self):
        record = normalize({})
        assert record.timestamp is None
        assert record.beliefs == ("",)
        assert record.favlang == ""
        assert record.value("humangood") == 0

    def test_bad_timestamp_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="progrelig.csv_parser"):
            normalize(make_raw_row("yesterday"))
        assert "yesterday" in caplog.text


class TestLoading:

    def test_empty_csv_raises(self):
        with pytest.raises(LoadError):
            parse_raw_rows("")

    def test_missing_columns_warn(self):
        with pytest.warns(UserWarning, match="missing columns"):
            rows = parse_raw_rows(f'Timestamp,"{FIELDS["beliefs"]}"\n2014/04/25 11:44:09 AM AST,Christian\n')
        assert len(rows) == 1

    def test_full_header_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rows = parse_raw_rows(build_example_csv())
        assert len(rows) == 12

    def test_quoted_multi_values_survive_csv(self):
        records = parse_csv_string(build_example_csv())
        assert records[5].beliefs == ("Atheist", "Liberal")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LoadError):
            load_raw_rows(tmp_path / "nope.csv")

    def test_non_utf8_file_raises(self, tmp_path):
        path = tmp_path / "responses.csv"
        path.write_bytes(build_example_csv().encode("utf-8") + b"\xff\xfe,bad\n")
        with pytest.raises(LoadError):
            load_raw_rows(path)

    def test_oversized_field_raises(self):
        content = build_example_csv() + '"' + "x" * 200000 + '"\n'
        with pytest.raises(LoadError, match="Malformed CSV"):
            parse_raw_rows(content)

    def test_load_responses(self, tmp_path):
        path = tmp_path / "responses.csv"
        path.write_text(build_example_csv(), encoding="utf-8")

        records = load_responses(path)

        assert len(records) == 12
        assert records[0].favlang == "go"
        assert records[10].timestamp is None
