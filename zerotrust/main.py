"""Command-line host for ZeroTrust scans."""

import argparse
import json
import logging
import sys
import time
from typing import Optional

from .analyzer import InvalidInputError, ScanEngine
from .analyzer.metrics import metrics
from .config import Config, load_config, validate_config
from .history import (
    ALL_STATUSES,
    HistoryQuery,
    SortKey,
    export_csv,
    export_json,
    export_text,
    grouped_history,
    summarize,
)
from .history.age import display_time
from .history.export import DEFAULT_TEXT_TITLE
from .storage import ScanHistory, ScanStatus, ScanType

logger = logging.getLogger(__name__)

BUCKET_TITLES = {
    "today": "Today",
    "yesterday": "Yesterday",
    "this_week": "This Week",
    "older": "Older",
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def _build_history(config: Config) -> ScanHistory:
    if config.history_sample_data:
        return ScanHistory.with_samples()
    return ScanHistory()


def cmd_scan(args, config: Config) -> int:
    engine = ScanEngine(config.catalog, _build_history(config))
    if config.scan_delay_seconds:
        time.sleep(config.scan_delay_seconds)
    try:
        outcome, record = engine.scan_and_record(args.text, args.type)
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Input: {outcome.input}")
    print(f"Type: {outcome.scan_type.value}")
    print(f"Risk: {outcome.risk_score}/100")
    print(f"Threat level: {outcome.threat_level.value}")
    print(f"Recommendation: {outcome.recommendation.value.upper()}")
    if outcome.threat_indicators:
        print("Indicators:")
        for indicator in outcome.threat_indicators:
            print(f"  - {indicator}")
    else:
        print("No threats detected")
    logger.debug("Recorded scan %s as %s", record.id, record.status)
    return 0


def cmd_history(args, config: Config) -> int:
    history = ScanHistory.with_samples() if args.samples or config.history_sample_data else ScanHistory()
    records = history.list()

    if args.format == "csv":
        print(export_csv(records))
        return 0
    if args.format == "json":
        print(export_json(records))
        return 0
    if args.format == "text":
        print(export_text(records, title=DEFAULT_TEXT_TITLE))
        return 0

    options = HistoryQuery(status_filter=args.status, text_filter=args.search, sort_key=args.sort)
    groups = grouped_history(records, options)
    if not len(groups):
        print("No scans in your history" if args.status == ALL_STATUSES else f"No {args.status} scans in your history")
    for bucket, bucket_records in groups.sections():
        print(BUCKET_TITLES[bucket])
        for record in bucket_records:
            print(
                f"  [{record.id}] {record.subject} ({record.type}) "
                f"{record.threat_level}/{record.status} - {display_time(record.occurred_at)}"
            )

    stats = summarize(records)
    counts = stats.filter_counts()
    print(
        f"\nAll ({counts['all']})  Blocked ({counts['blocked']})  "
        f"Flagged ({counts['flagged']})  Safe ({counts['safe']})"
    )
    return 0


def cmd_metrics(args, config: Config) -> int:
    engine = ScanEngine(config.catalog)
    for text in args.inputs or []:
        try:
            engine.scan(text, args.type)
        except InvalidInputError as exc:
            logger.warning("Skipping input: %s", exc)
    metrics.log_summary()
    print(json.dumps(metrics.get_summary(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zerotrust", description="Heuristic phishing risk scanner")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan a URL, email or SMS text")
    scan.add_argument("text")
    scan.add_argument("--type", choices=[t.value for t in ScanType], default=ScanType.URL.value)
    scan.set_defaults(func=cmd_scan)

    history = sub.add_parser("history", help="Show scan history")
    history.add_argument(
        "--status",
        choices=[ALL_STATUSES] + [s.value for s in ScanStatus],
        default=ALL_STATUSES,
    )
    history.add_argument("--search", default="")
    history.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.DATE.value)
    history.add_argument("--format", choices=["grouped", "csv", "json", "text"], default="grouped")
    history.add_argument("--samples", action="store_true", help="Include the demo scans")
    history.set_defaults(func=cmd_history)

    metrics_cmd = sub.add_parser("metrics", help="Scan inputs and print detection metrics")
    metrics_cmd.add_argument("inputs", nargs="*")
    metrics_cmd.add_argument("--type", choices=[t.value for t in ScanType], default=ScanType.URL.value)
    metrics_cmd.set_defaults(func=cmd_metrics)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()

    errors = validate_config(config)
    if errors:
        for error in errors:
            print(f"Config error: {error}", file=sys.stderr)
        return 1

    _configure_logging(config.log_level)
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
