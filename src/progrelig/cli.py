"""
Command line entry point.

    progrelig responses.csv -o results.html
    progrelig responses.csv --format yaml
"""

import argparse
import logging
import sys
from typing import List, Optional

from progrelig import config
from progrelig.backends import ViewMode, generate_html
from progrelig.pipeline import run
from progrelig.schema import STATEMENTS, short_key
from progrelig.serialization import results_to_json, results_to_yaml

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="progrelig",
        description="Analyze the Programmers and Religion survey export",
    )
    parser.add_argument(
        "responses_csv",
        nargs="?",
        default=str(config.RESPONSES_CSV),
        help="Path to the survey export (default: %(default)s)",
    )
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument(
        "--format",
        choices=["html", "json", "yaml"],
        default="html",
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--view",
        choices=[m.value for m in ViewMode],
        default=ViewMode.ALL.value,
        help="Views to render in html output (default: %(default)s)",
    )
    parser.add_argument(
        "--belief",
        default=config.AGREEMENT_BELIEF,
        help="Statement to correlate with favorite language (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=config.APP_VERSION)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if short_key(args.belief) not in STATEMENTS:
        parser.error(f"not a statement field: {args.belief}")

    result = run(args.responses_csv, belief=args.belief)
    if result is None:
        return 1

    if args.format == "json":
        out = results_to_json(result.stream, result.table, result.summary)
    elif args.format == "yaml":
        out = results_to_yaml(result.stream, result.table, result.summary)
    else:
        out = generate_html(result.stream, result.table, mode=ViewMode(args.view))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(out)
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(out + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
