"""
Schema Registry for the survey export.

Maps short, convenient keys to the full question text as found in the
CSV header, and declares how each column is parsed:
    - multi-valued fields (several selections, delimiter separated)
    - statement fields (1 strongly disagree .. 5 strongly agree, 0 = no response)
    - other numeric fields (years of experience)

Everything here is a process-wide constant. Nothing mutates it.
"""

import re
from types import MappingProxyType
from typing import Optional, Tuple


TIMESTAMP = "Timestamp"

FIELDS = MappingProxyType({
    "beliefs": "How would you categorize your beliefs?",
    "churchatt": "How often do you voluntarily attend religious services?",
    "superexst": "Supernatural forces exist which cannot be directly addressed by science",
    "superpers": "I have personally had a supernatural spiritual experience",
    "godrelate": "We can relate to God personally, as opposed to an impersonal force",
    "godspeaks": "God communicates to people in ways we can clearly understand",
    "bibletrue": "Holy scriptures are a reliable source of divine truth",
    "bibleusfl": "Holy scriptures are a reliable source of practical guidance for everyday life",
    "divpunish": "Unrighteousness or wrongdoing will be punished in the afterlife",
    "divreward": "Righteousness is rewarded in the afterlife",
    "universal": "All people will eventually be reconciled with or joined to God",
    "humangood": "Human beings are basically or inherently good",
    "suffersin": "Human suffering in this life is caused by sin or unrighteousness",
    "humancrea": "Human beings were specially created in their present form, apart from natural processes",
    "naturcrea": "Naturalistic theories are insufficient to account for the origin and complexity of life",
    "favlang": "What is your favorite programming language?",
    "worklangs": "What is your primary programming language used at work (if any)?",
    "progyears": "How many years have you been programming?",
    "workyears": "How many years have you been programming professionally?",
    "maxeducat": "How would you describe your education?",
    "feedback": "Feedback",
})

_KEYS_BY_QUESTION = MappingProxyType({text: key for key, text in FIELDS.items()})

# Short keys, in survey order
MULTI_VALUED_FIELDS: Tuple[str, ...] = ("beliefs", "worklangs")

STATEMENTS: Tuple[str, ...] = (
    "superexst",
    "superpers",
    "godrelate",
    "godspeaks",
    "bibletrue",
    "bibleusfl",
    "divpunish",
    "divreward",
    "universal",
    "humangood",
    "suffersin",
    "humancrea",
    "naturcrea",
)

OTHER_NUMS: Tuple[str, ...] = ("progyears", "workyears")

NUMERIC_FIELDS: Tuple[str, ...] = STATEMENTS + OTHER_NUMS

# Religions represented in the respondents' beliefs
RELIGIONS = frozenset(["Christian", "Buddhist", "Jewish", "Muslim", "Pagan", "Hindu"])

# Labels that indicate a particular leaning
QUALITATIVE_MODIFIERS = frozenset(["Liberal", "Moderate", "Conservative"])

# Ordered: earlier patterns shadow later ones ("objective-c" contains "c").
LANG_PATTERNS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"c\++"), "c++"),
    (re.compile(r"objective.*c"), "objective-c"),
    (re.compile(r"go(|lang)"), "go"),
    (re.compile(r"pyth.*"), "python"),
    (re.compile(r"(c#|\.net)"), "c#"),
)

MULTI_VALUE_SEPARATOR = re.compile(r"[;,]")

# "2014/04/25 11:44:09 AM AST" -- the zone label is appended at parse time
TIMESTAMP_FORMAT = "%Y/%m/%d %I:%M:%S %p"


def question_text(key: str) -> str:
    """Return the full question text for a short key (KeyError if unknown)."""
    return FIELDS[key]


def short_key(field: str) -> Optional[str]:
    """
    Resolve a short key or full question text to the short key.

    Returns None when the field is not part of the schema.
    """
    if field in FIELDS:
        return field
    return _KEYS_BY_QUESTION.get(field)


def is_multi_valued(field: str) -> bool:
    return short_key(field) in MULTI_VALUED_FIELDS


def is_statement(field: str) -> bool:
    return short_key(field) in STATEMENTS


def is_numeric(field: str) -> bool:
    return short_key(field) in NUMERIC_FIELDS


__all__ = [
    "TIMESTAMP",
    "FIELDS",
    "MULTI_VALUED_FIELDS",
    "STATEMENTS",
    "OTHER_NUMS",
    "NUMERIC_FIELDS",
    "RELIGIONS",
    "QUALITATIVE_MODIFIERS",
    "LANG_PATTERNS",
    "TIMESTAMP_FORMAT",
    "question_text",
    "short_key",
    "is_multi_valued",
    "is_statement",
    "is_numeric",
]
