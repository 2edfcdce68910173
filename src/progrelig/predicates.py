"""
Predicates for categorizing responses.

All predicates are read-only over a NormalizedRecord.
"""

from typing import Callable, Tuple

from progrelig.model import NormalizedRecord
from progrelig.schema import QUALITATIVE_MODIFIERS, RELIGIONS


def is_religious(record: NormalizedRecord) -> bool:
    """
    True if the respondent named at least one religion among their beliefs.

    Membership is exact and case-sensitive: "christian" or " Christian"
    does not count.
    """
    return any(belief in RELIGIONS for belief in record.beliefs)


def make_has_opinion(belief: str) -> Callable[[NormalizedRecord], bool]:
    """
    Build a predicate that keeps respondents who answered a statement.

    Args:
        belief: Short key or full question text of a numeric field

    Returns:
        Predicate that is False for no response (0) and unparseable (None)
    """
    def has_opinion(record: NormalizedRecord) -> bool:
        value = record.value(belief)
        return value is not None and value > 0

    return has_opinion


def leanings(record: NormalizedRecord) -> Tuple[str, ...]:
    """Beliefs that are qualitative modifiers (Liberal, Moderate, Conservative)."""
    return tuple(b for b in record.beliefs if b in QUALITATIVE_MODIFIERS)


__all__ = ["is_religious", "make_has_opinion", "leanings"]
