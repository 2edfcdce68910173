"""
Serialization helpers for aggregate results (ResponseStream, AgreementTable,
SurveySummary).

Output goes through an intermediate dict representation, then JSON or YAML.
Datetimes are written as ISO 8601 strings.
"""
from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict

import yaml

from progrelig.analyzer import SurveySummary
from progrelig.model import (
    AgreementRow,
    AgreementTable,
    ResponseStream,
    StreamLayer,
    StreamPoint,
)


def _iso(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.isoformat()


def point_to_dict(p: StreamPoint) -> Dict[str, Any]:
    return {"hour": _iso(p.hour), "count": p.count, "y0": p.y0}


def layer_to_dict(layer: StreamLayer) -> Dict[str, Any]:
    return {
        "religious": layer.religious,
        "total": layer.total,
        "points": [point_to_dict(p) for p in layer.points],
    }


def stream_to_dict(s: ResponseStream) -> Dict[str, Any]:
    x_domain = [_iso(s.x_domain[0]), _iso(s.x_domain[1])] if s.x_domain else None
    return {
        "layers": [layer_to_dict(layer) for layer in s.layers],
        "x_domain": x_domain,
        "y_domain": list(s.y_domain),
        "width": s.width,
        "height": s.height,
    }


def row_to_dict(r: AgreementRow) -> Dict[str, Any]:
    return {
        "language": r.language,
        "total": r.total,
        "disagree": r.disagree,
        "neutral": r.neutral,
        "agree": r.agree,
    }


def table_to_dict(t: AgreementTable) -> Dict[str, Any]:
    return {
        "belief": t.belief,
        "min_count": t.min_count,
        "rows": [row_to_dict(r) for r in t.rows],
    }


def summary_to_dict(s: SurveySummary) -> Dict[str, Any]:
    busiest = None
    if s.busiest_hour is not None:
        busiest = {"hour": _iso(s.busiest_hour[0]), "count": s.busiest_hour[1]}
    return {
        "total_responses": s.total_responses,
        "religious": s.religious,
        "non_religious": s.non_religious,
        "invalid_timestamps": s.invalid_timestamps,
        "first_response": _iso(s.first_response),
        "last_response": _iso(s.last_response),
        "belief_counts": dict(s.belief_counts),
        "leaning_counts": dict(s.leaning_counts),
        "language_counts": dict(s.language_counts),
        "statements": {k: asdict(v) for k, v in s.statements.items()},
        "busiest_hour": busiest,
        "warnings": list(s.warnings),
    }


def results_to_dict(
    stream: ResponseStream,
    table: AgreementTable,
    summary: SurveySummary | None = None,
) -> Dict[str, Any]:
    d = {
        "response_stream": stream_to_dict(stream),
        "agreement_table": table_to_dict(table),
    }
    if summary is not None:
        d["summary"] = summary_to_dict(summary)
    return d


def results_to_json(stream: ResponseStream, table: AgreementTable,
                    summary: SurveySummary | None = None) -> str:
    return json.dumps(results_to_dict(stream, table, summary), sort_keys=True, indent=2)


def results_to_yaml(stream: ResponseStream, table: AgreementTable,
                    summary: SurveySummary | None = None) -> str:
    return yaml.safe_dump(results_to_dict(stream, table, summary), sort_keys=False)
