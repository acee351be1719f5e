"""
Run a Google Analytics report extraction from CLI.
"""

from __future__ import annotations

import argparse
import itertools
import json
import sys

from ga_extractor.domain.extraction import MetricType
from ga_extractor.errors import ExtractionError, ExtractionValidationError
from ga_extractor.logging_utils import configure_logging
from ga_extractor.services.extraction_service import get_extraction_service


def _parse_metric(raw: str) -> dict[str, str]:
    name, separator, metric_type = raw.rpartition(":")
    allowed = {member.value for member in MetricType}
    if not separator or not name or metric_type.strip().upper() not in allowed:
        raise argparse.ArgumentTypeError(
            f"Metric must look like NAME:TYPE with TYPE one of {', '.join(sorted(allowed))}, got '{raw}'."
        )
    return {"name": name, "type": metric_type}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract Google Analytics report rows as JSON lines.")
    parser.add_argument("--start-date", dest="start_date", required=True)
    parser.add_argument(
        "--end-date",
        dest="end_date",
        default=None,
        help="Defaults to yesterday.",
    )
    parser.add_argument(
        "--dimension",
        dest="dimensions",
        action="append",
        default=[],
        help="Dimension name, e.g. ga:date. Repeat for more.",
    )
    parser.add_argument(
        "--metric",
        dest="metrics",
        action="append",
        type=_parse_metric,
        default=[],
        help="Metric as NAME:TYPE, e.g. ga:pageviews:INTEGER. Repeat for more.",
    )
    parser.add_argument("--property", dest="properties", action="append", default=[])
    parser.add_argument("--view", dest="views", action="append", default=[])
    parser.add_argument("--limit", dest="limit", type=int, default=None)
    parser.add_argument("--log-level", dest="log_level", default="INFO")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    options = {
        "startDate": args.start_date,
        "endDate": args.end_date,
        "dimensions": args.dimensions,
        "metrics": args.metrics,
        "properties": args.properties,
        "views": args.views,
    }

    service = get_extraction_service()
    try:
        rows = service.extract(options)
        if args.limit is not None:
            rows = itertools.islice(rows, max(0, args.limit))
        for row in rows:
            print(json.dumps(row, default=str))
    except ExtractionValidationError as exc:
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return 2
    except ExtractionError as exc:
        print(f"Extraction failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
