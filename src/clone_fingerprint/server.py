"""HTTP endpoint exposing batch comparisons as JSON."""
from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from flask import Flask, jsonify, request

from .analyzer import BatchAnalyzer
from .cli import add_render_arguments, configure_logging, render_config_from_args
from .config import DEFAULT_SERVER_USER_AGENT, RenderConfig, ReportConfig
from .inputs import InputError, parse_targets_payload
from .report import ReportBuilder

logger = logging.getLogger(__name__)

AnalyzerFactory = Callable[[RenderConfig], BatchAnalyzer]

RUNNING_MESSAGE = "Server is running. Use POST /analyze to analyze URLs."


def default_render_config() -> RenderConfig:
    return RenderConfig(wait_until="domcontentloaded", user_agent=DEFAULT_SERVER_USER_AGENT)


def create_app(
    render_config: Optional[RenderConfig] = None,
    *,
    analyzer_factory: Optional[AnalyzerFactory] = None,
    report_config: Optional[ReportConfig] = None,
) -> Flask:
    """Build the Flask app; every request gets its own analyzer and browser session."""
    app = Flask(__name__)
    config = render_config or default_render_config()
    make_analyzer: AnalyzerFactory = analyzer_factory or BatchAnalyzer
    builder = ReportBuilder(report_config or ReportConfig())

    @app.get("/")
    def index():
        return RUNNING_MESSAGE, 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.post("/analyze")
    def analyze():
        payload = request.get_json(silent=True)
        try:
            targets = parse_targets_payload(payload)
        except InputError as exc:
            logger.warning("Rejected batch: %s", exc)
            return jsonify({"error": str(exc)}), 400

        try:
            batch = make_analyzer(config).run(targets)
        except Exception as exc:
            logger.exception("Batch analysis failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(builder.build_json(batch))

    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve template comparisons over HTTP")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=3000, help="Port to listen on")
    add_render_arguments(parser)
    parser.set_defaults(wait_until="domcontentloaded")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    render_config = render_config_from_args(args, user_agent=DEFAULT_SERVER_USER_AGENT)
    app = create_app(render_config)
    logger.info("Server running at http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
