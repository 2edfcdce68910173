"""
Programmers & Religion Survey Analysis (progrelig)

Parses the survey response export, derives categorical and numeric
summaries, and renders two views:
    - a stacked area of response arrival, split by religiosity
    - an agreement table correlating one belief statement with
      favorite programming language

PIPELINE:
---------
    raw CSV rows -> normalize (per row) -> typed table
    typed table  -> aggregators (read-only, independent)
    aggregates   -> backends (SVG / HTML markup)

The typed table is never mutated after normalization.
"""

__version__ = "0.1.0"
