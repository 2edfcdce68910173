"""
Example survey export for demos and tests.

Builds a dozen respondents spread over one afternoon, with a mix of
religious and non-religious beliefs, language spellings that exercise the
alias patterns, a skipped statement, an unparseable statement and an
unparseable timestamp.
"""
import csv
from io import StringIO
from typing import List

from progrelig.model import RawRecord
from progrelig.schema import FIELDS, TIMESTAMP


def make_raw_row(timestamp: str, beliefs: str = "", favlang: str = "", **answers: str) -> RawRecord:
    """Raw export row with every survey column present; unset answers are blank."""
    row = {TIMESTAMP: timestamp}
    for key, question in FIELDS.items():
        row[question] = ""
    row[FIELDS["beliefs"]] = beliefs
    row[FIELDS["favlang"]] = favlang
    for key, value in answers.items():
        row[FIELDS[key]] = value
    return row


def build_example_rows() -> List[RawRecord]:
    return [
        make_raw_row("2014/04/25 11:44:09 AM AST", "Christian;Liberal", "Go",
                     humangood="4", worklangs="Go;Python", progyears="12", workyears="8"),
        make_raw_row("2014/04/25 11:50:00 AM AST", "Atheist", "Go", humangood="2"),
        make_raw_row("2014/04/25 12:10:00 PM AST", "Christian", "Go", humangood="3"),
        make_raw_row("2014/04/25 12:20:00 PM AST", "Christian", "Go", humangood="5"),
        make_raw_row("2014/04/25 12:30:00 PM AST", "Agnostic", "Python 3", humangood="5"),
        make_raw_row("2014/04/25 01:00:00 PM AST", "Atheist,Liberal", "python", humangood="4"),
        make_raw_row("2014/04/25 01:05:00 PM AST", "Buddhist", "Python", humangood="2"),
        make_raw_row("2014/04/25 01:15:00 PM AST", "Atheist", "Python 2.7", humangood="0"),
        make_raw_row("2014/04/25 01:20:00 PM AST", "Jewish;Moderate", "Ruby", humangood="4"),
        make_raw_row("2014/04/25 01:25:00 PM AST", "Atheist", "C++11", humangood="n/a"),
        make_raw_row("not a date", "Muslim", "Haskell", humangood="1"),
        make_raw_row("2014/04/25 02:10:00 PM AST", "Pagan", "pythonista", humangood="4",
                     feedback="Interesting survey!"),
    ]


def build_example_csv() -> str:
    """The example rows as CSV text, header first."""
    rows = build_example_rows()
    out = StringIO()
    writer = csv.DictWriter(out, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    writer.writerows(rows)
    return out.getvalue()
