"""
End-to-end run: load → normalize → aggregate → summarize.

A load failure is logged and the run produces nothing; no exception
escapes and nothing is rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from progrelig import config
from progrelig.aggregators import agreement_table, response_stream
from progrelig.analyzer import SurveySummary, analyze_responses
from progrelig.csv_parser import LoadError, load_responses
from progrelig.model import AgreementTable, NormalizedRecord, ResponseStream

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything derived from one survey export."""
    records: List[NormalizedRecord] = field(default_factory=list)
    stream: ResponseStream = field(default_factory=ResponseStream)
    table: Optional[AgreementTable] = None
    summary: Optional[SurveySummary] = None


def analyze(records: Sequence[NormalizedRecord], belief: Optional[str] = None) -> PipelineResult:
    """Run both aggregators and the summary over an already typed table."""
    records = list(records)
    stream = response_stream(records)
    table = agreement_table(records, belief=belief)
    summary = analyze_responses(records, stream=stream)

    for warning in summary.warnings:
        logger.warning(warning)

    return PipelineResult(records=records, stream=stream, table=table, summary=summary)


def run(csv_path=None, belief: Optional[str] = None) -> Optional[PipelineResult]:
    """
    Load the survey export and derive all results.

    Args:
        csv_path: Path to the responses CSV (default from config)
        belief: Statement for the agreement table (default from config)

    Returns:
        PipelineResult, or None if the export could not be loaded
    """
    csv_path = config.RESPONSES_CSV if csv_path is None else csv_path
    try:
        records = load_responses(csv_path)
    except LoadError as e:
        logger.error("Survey export not loaded, nothing rendered: %s", e)
        return None

    return analyze(records, belief=belief)
