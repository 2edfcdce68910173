"""
CSV Parser (Layer 1: Raw Export → Typed Respondent Table).

Reads the survey export and normalizes each row into a NormalizedRecord.

CSV Format:
    One header row of full question text (see schema.FIELDS) plus "Timestamp",
    one row per respondent.

Parsing Notes:
    - Multi-valued answers are split on ';' or ',' (no trimming, no dedup)
    - Statement and year fields are numbers; blank means no response (0)
    - Malformed values degrade to None / pass-through, they never raise
    - Only an unreadable, header-less or malformed file is an error (LoadError)
"""

import csv
import logging
import math
import re
import warnings
from datetime import datetime
from io import StringIO
from typing import List, Optional, Tuple

from progrelig import config
from progrelig.model import NormalizedRecord, RawRecord
from progrelig.schema import (
    FIELDS,
    LANG_PATTERNS,
    MULTI_VALUE_SEPARATOR,
    TIMESTAMP,
    TIMESTAMP_FORMAT,
    is_multi_valued,
    is_numeric,
    is_statement,
)

logger = logging.getLogger(__name__)

# Plain decimal notation only: no digit separators, no inf / nan spellings
_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class LoadError(Exception):
    """Raised when the survey export cannot be read."""
    pass


def parse_list(value: str) -> Tuple[str, ...]:
    """Split a multi-valued answer into its parts ("Christian" -> ("Christian",))."""
    return tuple(MULTI_VALUE_SEPARATOR.split(value))


def parse_number(value: str) -> Optional[float]:
    """
    Coerce a numeric answer.

    Returns:
        0 for blank text (no response), the number for numeric text,
        None for anything else (including inf / nan spellings)
    """
    if value is None or value.strip() == "":
        return 0
    if not _NUMBER_RE.fullmatch(value.strip()):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def parse_timestamp(value: str, zone: Optional[str] = None) -> Optional[datetime]:
    """
    Parse an export timestamp such as "2014/04/25 11:44:09 AM AST".

    The zone label is matched literally and not interpreted.
    Returns None if the value does not fit the format.
    """
    if zone is None:
        zone = config.TIMEZONE_LABEL
    fmt = f"{TIMESTAMP_FORMAT} {zone}" if zone else TIMESTAMP_FORMAT
    try:
        return datetime.strptime((value or "").strip(), fmt)
    except ValueError:
        return None


def parse_lang(value: str) -> str:
    """
    Parse and normalize a programming language answer.

    Patterns are tried in declaration order; the first match wins.
    Unmatched answers pass through stripped and lowercased.
    """
    value = (value or "").strip().lower()
    for pattern, lang in LANG_PATTERNS:
        if pattern.search(value):
            return lang
    return value


def _column(raw: RawRecord, key: str) -> str:
    return raw.get(FIELDS[key]) or ""


def normalize(raw: RawRecord) -> NormalizedRecord:
    """
    Convert one raw export row into a NormalizedRecord.

    The input mapping is left untouched.

    Args:
        raw: Mapping of question text -> exported string

    Returns:
        NormalizedRecord
    """
    timestamp_text = raw.get(TIMESTAMP) or ""
    timestamp = parse_timestamp(timestamp_text)
    if timestamp is None:
        logger.debug("Unparseable timestamp %r", timestamp_text)

    answers = {}
    statements = {}
    for key in FIELDS:
        text = _column(raw, key)
        if is_multi_valued(key):
            answers[key] = parse_list(text)
        elif is_statement(key):
            statements[key] = parse_number(text)
        elif is_numeric(key):
            answers[key] = parse_number(text)
        elif key == "favlang":
            answers[key] = parse_lang(text)
        else:
            answers[key] = text

    return NormalizedRecord(timestamp=timestamp, statements=statements, **answers)


def parse_raw_rows(csv_content: str) -> List[RawRecord]:
    """
    Parse CSV content into raw rows keyed by header text.

    Raises:
        LoadError: If the CSV has no header row or is malformed
    """
    reader = csv.DictReader(StringIO(csv_content))

    try:
        fieldnames = reader.fieldnames
        if fieldnames is None:
            raise LoadError("CSV is empty")

        expected = [TIMESTAMP] + list(FIELDS.values())
        missing = [col for col in expected if col not in fieldnames]
        if missing:
            warnings.warn(f"Survey export is missing columns: {missing}", UserWarning)

        return [dict(row) for row in reader]
    except csv.Error as e:
        raise LoadError(f"Malformed CSV at line {reader.line_num}: {e}") from e


def load_raw_rows(filepath) -> List[RawRecord]:
    """
    Read the survey export file into raw rows.

    Raises:
        LoadError: If the file is missing, unreadable, not UTF-8 or empty
    """
    try:
        with open(filepath, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read survey export {filepath}: {e}") from e

    return parse_raw_rows(content)


def normalize_rows(rows: List[RawRecord]) -> List[NormalizedRecord]:
    """Normalize every raw row, in order."""
    records = [normalize(row) for row in rows]
    invalid = sum(1 for r in records if r.timestamp is None)
    if invalid:
        logger.info("%d of %d rows have no usable timestamp", invalid, len(records))
    return records


def parse_csv_string(csv_content: str) -> List[NormalizedRecord]:
    """Parse CSV content straight into the typed table."""
    return normalize_rows(parse_raw_rows(csv_content))


def load_responses(filepath) -> List[NormalizedRecord]:
    """
    Load and normalize the survey export.

    Args:
        filepath: Path to the responses CSV

    Returns:
        List of NormalizedRecord, one per respondent

    Raises:
        LoadError: If the export cannot be read
    """
    rows = load_raw_rows(filepath)
    logger.info("Loaded %d responses from %s", len(rows), filepath)
    return normalize_rows(rows)


__all__ = [
    "LoadError",
    "parse_list",
    "parse_number",
    "parse_timestamp",
    "parse_lang",
    "normalize",
    "normalize_rows",
    "parse_raw_rows",
    "parse_csv_string",
    "load_raw_rows",
    "load_responses",
]
