"""
Response Analyzer: categorical and numeric summaries of the typed table.

This module provides lightweight inventory of the survey responses:
    - Respondent counts and religiosity split
    - Belief, leaning and favorite-language frequencies
    - Per-statement opinion counts and means
    - Warning flags for data that will not render faithfully

IMPORTANT: This is read-only. It does NOT modify the records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from progrelig.aggregators import counts, response_stream
from progrelig.model import NormalizedRecord, ResponseStream
from progrelig.predicates import is_religious, leanings, make_has_opinion
from progrelig.schema import STATEMENTS


@dataclass
class StatementStats:
    """Opinion count and mean response for one statement."""
    opinions: int = 0
    no_response: int = 0
    unparseable: int = 0
    mean: Optional[float] = None


@dataclass
class SurveySummary:
    """Summary report for a set of responses."""

    total_responses: int = 0
    religious: int = 0
    non_religious: int = 0
    invalid_timestamps: int = 0
    first_response: Optional[datetime] = None
    last_response: Optional[datetime] = None

    belief_counts: Dict[str, int] = field(default_factory=dict)
    leaning_counts: Dict[str, int] = field(default_factory=dict)
    language_counts: Dict[str, int] = field(default_factory=dict)
    statements: Dict[str, StatementStats] = field(default_factory=dict)

    busiest_hour: Optional[Tuple[datetime, int]] = None

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _statement_stats(records: Sequence[NormalizedRecord], key: str) -> StatementStats:
    stats = StatementStats()
    has_opinion = make_has_opinion(key)
    answered = []
    for record in records:
        value = record.value(key)
        if value is None:
            stats.unparseable += 1
        elif has_opinion(record):
            answered.append(value)
        else:
            stats.no_response += 1
    stats.opinions = len(answered)
    if answered:
        stats.mean = sum(answered) / len(answered)
    return stats


def analyze_responses(
    records: Sequence[NormalizedRecord],
    count_ceiling: Optional[int] = None,
    stream: Optional[ResponseStream] = None,
) -> SurveySummary:
    """
    Summarize the typed respondent table.

    Checks for:
    - Responses without a usable timestamp
    - Hours whose stacked count exceeds the fixed count axis

    Args:
        records: Typed respondent table
        count_ceiling: Count axis top (default: the stream's, else from config)
        stream: Response stream already built from the same records

    Returns a SurveySummary with metrics and warnings.
    """
    if stream is None:
        stream = response_stream(records, count_ceiling=count_ceiling)
    if count_ceiling is None:
        count_ceiling = stream.y_domain[1]
    report = SurveySummary(total_responses=len(records))

    # =========================================================================
    # 1. RESPONDENTS
    # =========================================================================

    report.religious = sum(1 for r in records if is_religious(r))
    report.non_religious = report.total_responses - report.religious

    timestamps = [r.timestamp for r in records if r.timestamp is not None]
    report.invalid_timestamps = report.total_responses - len(timestamps)
    if timestamps:
        report.first_response = min(timestamps)
        report.last_response = max(timestamps)

    # =========================================================================
    # 2. CATEGORICAL FREQUENCIES
    # =========================================================================

    report.belief_counts = counts(b for r in records for b in r.beliefs if b)
    report.leaning_counts = counts(m for r in records for m in leanings(r))
    report.language_counts = counts(r.favlang for r in records if r.favlang)

    # =========================================================================
    # 3. STATEMENTS
    # =========================================================================

    for key in STATEMENTS:
        report.statements[key] = _statement_stats(records, key)

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    if report.invalid_timestamps:
        report.add_warning(
            f"Responses without a usable timestamp: {report.invalid_timestamps}"
        )

    totals = stream.hour_totals()
    if totals:
        hour = max(totals, key=lambda h: totals[h])
        report.busiest_hour = (hour, totals[hour])
        clipped = sorted(h for h, n in totals.items() if n > count_ceiling)
        if clipped:
            report.add_warning(
                f"Hours above the count axis ceiling of {count_ceiling}: "
                f"{', '.join(h.isoformat(sep=' ') for h in clipped)}"
            )

    return report


__all__ = ["StatementStats", "SurveySummary", "analyze_responses"]
