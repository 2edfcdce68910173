"""
Core Survey Model Objects

Defines the data structures flowing through the analysis pipeline:
    - RawRecord (one CSV row, strings keyed by question text)
    - NormalizedRecord (one respondent's typed answers)
    - Response stream layers (time x religiosity histogram, stacked)
    - Agreement table rows (belief x language fractions)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about CSV, SVG or HTML
        - Are immutable once built
        - Represent data, not behavior
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .schema import OTHER_NUMS, short_key


RawRecord = Dict[str, str]


@dataclass(frozen=True)
class NormalizedRecord:
    """
    One respondent's processed answers.

    Properties:
        timestamp:
            Submission time on the survey's local clock.
            None if the export value could not be parsed.

        beliefs / worklangs:
            Split multi-valued answers. Sub-items are NOT trimmed,
            so " Liberal" and "Liberal" are different values.

        statements:
            Statement short key -> response value.
                0     no response (blank or "0")
                1..5  strongly disagree .. strongly agree
                None  the export held something that is not a number

        progyears / workyears:
            Years of experience, same 0 / None convention.

        favlang:
            Normalized favorite language tag ("go", "python", ...).

        churchatt / maxeducat / feedback:
            Free text, kept as exported.
    """

    timestamp: Optional[datetime] = None
    beliefs: Tuple[str, ...] = ()
    worklangs: Tuple[str, ...] = ()
    statements: Mapping[str, Optional[float]] = field(default_factory=dict)
    progyears: Optional[float] = 0
    workyears: Optional[float] = 0
    favlang: str = ""
    churchatt: str = ""
    maxeducat: str = ""
    feedback: str = ""

    def __post_init__(self):
        # freeze the statement mapping too
        object.__setattr__(self, "statements", MappingProxyType(dict(self.statements)))

    def value(self, field_name: str) -> Optional[float]:
        """
        Numeric value of a statement or other numeric field.

        Args:
            field_name: Short key ("humangood") or full question text

        Returns:
            The stored value (0 for no response, None if unparseable)

        Raises:
            KeyError: If the field is not numeric
        """
        key = short_key(field_name)
        if key in OTHER_NUMS:
            return getattr(self, key)
        if key is not None and key in self.statements:
            return self.statements[key]
        raise KeyError(f"Not a numeric survey field: {field_name}")


@dataclass(frozen=True)
class StreamPoint:
    """One hour bucket of a stream layer; y0 is the top of the layers below."""
    hour: datetime
    count: int
    y0: int = 0

    @property
    def y1(self) -> int:
        return self.y0 + self.count


@dataclass(frozen=True)
class StreamLayer:
    """All hour buckets for one side of the religiosity split."""
    religious: bool
    points: Tuple[StreamPoint, ...] = ()

    @property
    def total(self) -> int:
        return sum(p.count for p in self.points)


@dataclass
class ResponseStream:
    """
    Stacked response-arrival histogram, ready for area rendering.

    Properties:
        layers: Layers bottom to top
        x_domain: (earliest, latest) timestamp seen, or None if no timestamps
        y_domain: Fixed count axis (0, ceiling)
        width / height: Plot size in pixels
    """
    layers: List[StreamLayer] = field(default_factory=list)
    x_domain: Optional[Tuple[datetime, datetime]] = None
    y_domain: Tuple[int, int] = (0, 200)
    width: int = 960
    height: int = 400

    def hour_totals(self) -> Dict[datetime, int]:
        """Combined count per hour across all layers."""
        totals: Dict[datetime, int] = {}
        for layer in self.layers:
            for point in layer.points:
                totals[point.hour] = totals.get(point.hour, 0) + point.count
        return totals


@dataclass(frozen=True)
class AgreementRow:
    """Fractions (disagree, neutral, agree) for one language; they sum to 1."""
    language: str
    fractions: Tuple[float, float, float]
    total: int = 0

    @property
    def disagree(self) -> float:
        return self.fractions[0]

    @property
    def neutral(self) -> float:
        return self.fractions[1]

    @property
    def agree(self) -> float:
        return self.fractions[2]


@dataclass
class AgreementTable:
    """Belief x language cross-tabulation, rows sorted by agreement."""
    belief: str
    rows: List[AgreementRow] = field(default_factory=list)
    min_count: int = 3

    def get_row(self, language: str) -> Optional[AgreementRow]:
        """
        Retrieve a row by language tag.

        Returns:
            AgreementRow or None if the language was not retained
        """
        for row in self.rows:
            if row.language == language:
                return row
        return None
