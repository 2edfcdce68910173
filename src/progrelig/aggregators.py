"""
Aggregators: reduce the typed respondent table for rendering.

Two independent reducers:
    - response_stream: respondents per hour, split by religiosity, stacked
    - agreement_table: one belief statement vs favorite language

IMPORTANT: Both read the table without modifying it, so they can run
in any order over the same records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from progrelig import config
from progrelig.model import (
    AgreementRow,
    AgreementTable,
    NormalizedRecord,
    ResponseStream,
    StreamLayer,
    StreamPoint,
)
from progrelig.predicates import is_religious, make_has_opinion
from progrelig.schema import short_key

logger = logging.getLogger(__name__)

DISAGREE, NEUTRAL, AGREE = 0, 1, 2


# =========================================================================
# HELPERS
# =========================================================================

def counts(values: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Map each value to the number of times it appears, in first-seen order."""
    result: Dict[Hashable, int] = {}
    for value in values:
        result[value] = result.get(value, 0) + 1
    return result


def running_total(values: Sequence[float]) -> List[float]:
    """Cumulative sums: [1, 2, 3] -> [1, 3, 6]."""
    totals: List[float] = []
    for ii, value in enumerate(values):
        totals.append(value + (totals[ii - 1] if ii else 0))
    return totals


def hour_ceil(dt: datetime) -> datetime:
    """Round up to the next whole hour; exact hours are unchanged."""
    floor = dt.replace(minute=0, second=0, microsecond=0)
    if floor == dt:
        return floor
    return floor + timedelta(hours=1)


@dataclass(frozen=True)
class LinearScale:
    """Maps a numeric domain onto a pixel range."""
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return r0
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)


@dataclass(frozen=True)
class TimeScale:
    """Maps a datetime domain onto a pixel range."""
    domain: Tuple[datetime, datetime]
    range: Tuple[float, float]

    def __call__(self, value: datetime) -> float:
        d0, d1 = self.domain
        span = (d1 - d0).total_seconds()
        r0, r1 = self.range
        if span == 0:
            return r0
        return r0 + (value - d0).total_seconds() * (r1 - r0) / span


def x_scale(stream: ResponseStream) -> Optional[TimeScale]:
    """Time axis for a stream, or None when no timestamps were seen."""
    if stream.x_domain is None:
        return None
    return TimeScale(domain=stream.x_domain, range=(0, stream.width))


def y_scale(stream: ResponseStream) -> LinearScale:
    """Fixed count axis; SVG y grows downward so the range is inverted."""
    return LinearScale(domain=stream.y_domain, range=(stream.height, 0))


# =========================================================================
# RESPONSE STREAM
# =========================================================================

def response_stream(
    records: Sequence[NormalizedRecord],
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
    count_ceiling: Optional[int] = None,
) -> ResponseStream:
    """
    Bucket respondents by religiosity and submission hour, then stack.

    1. Group by is_religious (layers in first-seen order), then by the
       hour ceiling of the timestamp. Hours without respondents are absent.
    2. A bucket's height is its record count.
    3. Layers stack on the hour key: y0 at an hour is the sum of the
       lower layers' counts at that same hour.

    Records without a timestamp are left out.
    """
    width = config.CHART_WIDTH if width is None else width
    height = config.CHART_HEIGHT if height is None else height
    count_ceiling = config.COUNT_CEILING if count_ceiling is None else count_ceiling

    groups: Dict[bool, Dict[datetime, int]] = {}
    timestamps: List[datetime] = []
    skipped = 0

    for record in records:
        if record.timestamp is None:
            skipped += 1
            continue
        timestamps.append(record.timestamp)
        hours = groups.setdefault(is_religious(record), {})
        hour = hour_ceil(record.timestamp)
        hours[hour] = hours.get(hour, 0) + 1

    if skipped:
        logger.debug("Response stream skipped %d records without timestamp", skipped)

    floor: Dict[datetime, int] = {}
    layers: List[StreamLayer] = []
    for religious, hours in groups.items():
        points = []
        for hour in sorted(hours):
            y0 = floor.get(hour, 0)
            points.append(StreamPoint(hour=hour, count=hours[hour], y0=y0))
            floor[hour] = y0 + hours[hour]
        layers.append(StreamLayer(religious=religious, points=tuple(points)))

    x_domain = (min(timestamps), max(timestamps)) if timestamps else None

    return ResponseStream(
        layers=layers,
        x_domain=x_domain,
        y_domain=(0, count_ceiling),
        width=width,
        height=height,
    )


# =========================================================================
# AGREEMENT TABLE
# =========================================================================

def _bin(value: float) -> int:
    if value == 3:
        return NEUTRAL
    return DISAGREE if value < 3 else AGREE


def agreement_table(
    records: Sequence[NormalizedRecord],
    belief: Optional[str] = None,
    by: str = "favlang",
    min_count: Optional[int] = None,
) -> AgreementTable:
    """
    Correlate one belief statement with a categorical field.

    Respondents without an opinion are dropped, the rest are binned into
    disagree (< 3), neutral (== 3) and agree (> 3) per value of `by`.
    Values with `min_count` responses or fewer are dropped, the rest are
    normalized to fractions and sorted by agree fraction, descending.
    Ties keep first-seen order.

    Args:
        records: Typed respondent table
        belief: Statement short key or question text (default from config)
        by: Record attribute to group on (default favorite language)
        min_count: Suppression threshold (default from config)

    Returns:
        AgreementTable
    """
    belief = config.AGREEMENT_BELIEF if belief is None else belief
    min_count = config.MIN_LANGUAGE_COUNT if min_count is None else min_count
    key = short_key(belief) or belief

    has_opinion = make_has_opinion(belief)
    stats: Dict[str, List[int]] = {}
    for record in records:
        if not has_opinion(record):
            continue
        group = getattr(record, by)
        bins = stats.setdefault(group, [0, 0, 0])
        bins[_bin(record.value(belief))] += 1

    logger.debug("Agreement stats for %s: %s", key, stats)

    rows = []
    for group, bins in stats.items():
        total = sum(bins)
        if total <= min_count:
            continue
        fractions = tuple(n / total for n in bins)
        rows.append(AgreementRow(language=group, fractions=fractions, total=total))

    rows.sort(key=lambda row: row.agree, reverse=True)

    return AgreementTable(belief=key, rows=rows, min_count=min_count)


__all__ = [
    "counts",
    "running_total",
    "hour_ceil",
    "LinearScale",
    "TimeScale",
    "x_scale",
    "y_scale",
    "response_stream",
    "agreement_table",
]
