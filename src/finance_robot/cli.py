"""
Command-line entry point.

    finance-robot import transactions.csv      # import and print totals as JSON
    finance-robot serve --port 8000            # run the HTTP API
"""

import argparse
import json
import sys
from pathlib import Path

from finance_robot.api.middleware.logging import configure_logging
from finance_robot.config import settings
from finance_robot.core.exceptions import CSVParseError
from finance_robot.services.insights import compute_totals
from finance_robot.services.transactions import import_csv


def cmd_import(csv_path: str, sample_size: int) -> int:
    """Import a CSV file and print the result and its totals to stdout."""
    path = Path(csv_path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
        return 1
    except UnicodeDecodeError:
        print(f"Error: File is not UTF-8 text: {csv_path}", file=sys.stderr)
        return 1

    try:
        outcome = import_csv(text, sample_size=sample_size)
    except CSVParseError as e:
        print(f"Error: Failed to parse CSV: {e.details}", file=sys.stderr)
        return 1

    result = {
        "imported": outcome.imported,
        "skipped": outcome.skipped,
        "sample": [txn.model_dump() for txn in outcome.sample],
        "totals": compute_totals(outcome.transactions).model_dump(by_alias=True),
    }
    print(json.dumps(result, indent=2))
    return 0


def cmd_serve(host: str, port: int) -> int:
    import uvicorn

    uvicorn.run("finance_robot.main:app", host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finance-robot", description="Finance Robot command-line tools"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    import_parser = sub.add_parser("import", help="Import a CSV export and print totals")
    import_parser.add_argument("csv_path", help="Path to the CSV file")
    import_parser.add_argument(
        "--sample",
        type=int,
        default=settings.import_sample_size,
        help="Number of imported records to echo back",
    )

    serve_parser = sub.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level, json_logs=settings.log_json, stream=sys.stderr)

    if args.command == "import":
        return cmd_import(args.csv_path, args.sample)
    return cmd_serve(args.host, args.port)


if __name__ == "__main__":
    sys.exit(main())
