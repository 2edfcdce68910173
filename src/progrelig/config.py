from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Project paths
# ---------------------------------------------------------------------------

# Root of the project (repo root)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DATA_DIR = PROJECT_ROOT / "data"

# Survey export; override to point at another copy of the responses
RESPONSES_CSV = Path(
    os.getenv("PROGRELIG_RESPONSES_CSV", str(DATA_DIR / "responses.csv")).strip()
)

# ---------------------------------------------------------------------------
# App identity
# ---------------------------------------------------------------------------

APP_NAME = "Programmers and Religion Survey Results"
APP_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Parsing
#
# Timestamps are exported as "2014/04/25 11:44:09 AM AST"; the zone label is
# a literal suffix, not an offset we interpret.
# ---------------------------------------------------------------------------

TIMEZONE_LABEL = os.getenv("PROGRELIG_TIMEZONE_LABEL", "AST").strip()

# ---------------------------------------------------------------------------
# Rendering / aggregation
#
# COUNT_CEILING is the fixed top of the response-stream count axis. It is not
# derived from the data: hours stacking above it clip.
# ---------------------------------------------------------------------------

CHART_WIDTH = int(os.getenv("PROGRELIG_CHART_WIDTH", "960"))
CHART_HEIGHT = int(os.getenv("PROGRELIG_CHART_HEIGHT", "400"))
COUNT_CEILING = int(os.getenv("PROGRELIG_COUNT_CEILING", "200"))

# Languages with this many opinions or fewer are left out of the agreement table
MIN_LANGUAGE_COUNT = int(os.getenv("PROGRELIG_MIN_LANGUAGE_COUNT", "3"))

# Statement correlated with favorite language
AGREEMENT_BELIEF = os.getenv("PROGRELIG_AGREEMENT_BELIEF", "humangood").strip()

# Layer fill range for the response stream (lightest -> darkest)
LAYER_COLORS = ("#aad", "#556")
