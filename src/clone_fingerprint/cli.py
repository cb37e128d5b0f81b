"""Command-line interface for the template fingerprint comparer."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .analyzer import BatchAnalyzer
from .config import DEFAULT_URLS_FILE, RenderConfig, ReportConfig
from .inputs import InputError, load_targets_file
from .renderer import RenderError
from .report import ReportBuilder

logger = logging.getLogger(__name__)

WAIT_UNTIL_CHOICES = ["load", "domcontentloaded", "networkidle", "commit"]
BROWSER_CHOICES = ["chromium", "firefox", "webkit"]


def add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--settle-delay", type=float, default=5.0, help="Seconds to wait after page load before reading the DOM")
    parser.add_argument("--timeout", type=float, default=30.0, help="Navigation timeout (seconds)")
    parser.add_argument("--wait-until", choices=WAIT_UNTIL_CHOICES, default="load", help="Page load event to wait for before the settle delay")
    parser.add_argument("--browser", choices=BROWSER_CHOICES, default="chromium", help="Browser engine used for rendering")
    parser.add_argument("--headful", action="store_true", help="Show the browser window instead of running headless")
    parser.add_argument("--user-agent", help="Override the browser User-Agent")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")


def render_config_from_args(args: argparse.Namespace, **defaults) -> RenderConfig:
    return RenderConfig(
        settle_delay_seconds=args.settle_delay,
        navigation_timeout=args.timeout,
        wait_until=args.wait_until,
        browser=args.browser,
        headless=not args.headful,
        user_agent=args.user_agent or defaults.get("user_agent"),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare rendered pages against a template page")
    parser.add_argument(
        "--urls-file",
        type=Path,
        default=Path(DEFAULT_URLS_FILE),
        help="Tab-separated 'url<TAB>brand name' lines; the first line is the template",
    )
    add_render_arguments(parser)
    parser.add_argument("--markdown", action="store_true", help="Emit a Markdown report instead of the console table")
    parser.add_argument("--output", type=Path, help="Path to save the report; prints to stdout if omitted")
    parser.add_argument("--json-output", type=Path, help="Optional path for JSON results")
    parser.add_argument("--pdf-output", type=Path, help="Optional path for a PDF report")
    parser.add_argument("--precision", type=int, default=2, help="Decimal places for similarity percentages")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        targets = load_targets_file(args.urls_file)
    except InputError as exc:
        logger.error("Invalid URL list: %s", exc)
        return 2

    render_config = render_config_from_args(args)
    report_config = ReportConfig(precision=args.precision)

    analyzer = BatchAnalyzer(render_config)
    logger.info("Running comparison for %d page(s)", len(targets))
    try:
        batch = analyzer.run(targets)
    except RenderError as exc:
        logger.error("Comparison aborted: %s", exc)
        return 1

    builder = ReportBuilder(report_config)
    report = builder.build_markdown(batch) if args.markdown else builder.build_table(batch)
    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(report, encoding="utf-8")
        logger.info("Report written to %s", args.output)
    else:
        print(report, end="")

    if args.json_output:
        _ensure_parent(args.json_output)
        payload = builder.build_json(batch)
        args.json_output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("JSON results written to %s", args.json_output)

    if args.pdf_output:
        _ensure_parent(args.pdf_output)
        try:
            builder.build_pdf(batch, str(args.pdf_output))
        except RuntimeError as exc:
            logger.error("Failed to generate PDF report: %s", exc)
        else:
            logger.info("PDF report written to %s", args.pdf_output)

    return 0


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
