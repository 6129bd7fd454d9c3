#!/usr/bin/env python
"""
Command line chart builder.

Reads pasted CSV or JSON from a file (or stdin), runs the chart pipeline and
prints the parsed schema and render descriptor as JSON. Optionally writes a
standalone Plotly HTML file.
"""

import argparse
import json
import sys

from loguru import logger

from chartgen.core.pipeline import ChartPipeline, ChartState
from chartgen.utils.chart_generators import ChartGenerators
from chartgen.utils.error_handler import InvalidChartKindError
from chartgen.utils.log_config import configure_logging
from chartgen.utils.vis_types import ChartKind
from chartgen.utils.vis_util import render_chart_html


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Turn CSV or JSON data into chart rendering parameters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chartgen sales.csv                          # Bar chart descriptor for a CSV file
  chartgen data.json --kind pie               # Pie wedges with percentages
  cat data.csv | chartgen --kind area --html chart.html
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file with CSV or JSON data ('-' reads stdin)",
    )
    parser.add_argument(
        "--kind",
        "-k",
        default=ChartKind.BAR.value,
        help="Chart kind: bar, line, pie or area",
    )
    parser.add_argument(
        "--html", metavar="PATH", help="Also write a standalone HTML chart"
    )
    parser.add_argument(
        "--skip-blank-lines",
        action="store_true",
        help="Ignore blank lines in CSV input",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """
    Execute the command line chart builder.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``

    Returns:
        Process exit code

    """
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        chart_kind = ChartKind.normalize(args.kind)
    except InvalidChartKindError as e:
        logger.error(str(e))
        return 2

    try:
        raw_text = _read_input(args.input)
    except OSError as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1

    pipeline = ChartPipeline(
        cache_enabled=False, skip_blank_lines=args.skip_blank_lines
    )
    result = pipeline.run(ChartState(raw_text=raw_text, chart_kind=chart_kind))

    if not result.renderable:
        logger.error("Could not parse data")
        return 1

    print(json.dumps(result.to_dict(), indent=2))

    if args.html:
        render_chart_html(
            ChartGenerators.build_figure(result.records, result.descriptor), args.html
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
