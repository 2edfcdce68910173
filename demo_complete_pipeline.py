#!/usr/bin/env python3
"""
Complete Pipeline Demo: CSV → typed table → aggregates → HTML

Shows the full workflow on the built-in example export:
1. Parse and normalize the CSV
2. Summarize the responses
3. Build the response stream and agreement table
4. Render both views to an HTML page
"""

from progrelig.analyzer import analyze_responses
from progrelig.aggregators import agreement_table, response_stream
from progrelig.backends import save_html_file
from progrelig.csv_parser import parse_csv_string
from progrelig.examples import build_example_csv
from progrelig.serialization import results_to_yaml


def main():
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: CSV → Records → Aggregates → HTML")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Parse CSV
    # =========================================================================
    print("\n1. PARSING CSV...")
    records = parse_csv_string(build_example_csv())
    print(f"   ✓ Respondents: {len(records)}")

    # =========================================================================
    # STEP 2: Summarize
    # =========================================================================
    print("\n2. SUMMARIZING...")
    summary = analyze_responses(records)
    print(f"   ✓ Religious: {summary.religious}  Non-religious: {summary.non_religious}")
    print(f"   ✓ Favorite languages: {summary.language_counts}")
    print(f"   ✓ Leanings: {summary.leaning_counts}")
    for warning in summary.warnings:
        print(f"      - {warning}")

    # =========================================================================
    # STEP 3: Aggregate
    # =========================================================================
    print("\n3. AGGREGATING...")
    stream = response_stream(records)
    table = agreement_table(records, belief="humangood")
    for layer in stream.layers:
        label = "religious" if layer.religious else "non-religious"
        print(f"   ✓ {label}: {layer.total} responses over {len(layer.points)} hours")
    for row in table.rows:
        print(f"   ✓ {row.language:<10} disagree {row.disagree:.2f}"
              f"  neutral {row.neutral:.2f}  agree {row.agree:.2f}")

    # =========================================================================
    # STEP 4: Render
    # =========================================================================
    print("\n4. RENDERING...")
    save_html_file("progrelig_results.html", stream, table)
    print("   ✓ Saved progrelig_results.html")

    print("\n5. YAML EXPORT:")
    print("-" * 80)
    print(results_to_yaml(stream, table))


if __name__ == "__main__":
    main()
