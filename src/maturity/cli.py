from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import structlog
from dotenv import load_dotenv

from maturity.analysis import detect_critical_gaps, framework_coverage, generate_roadmap
from maturity.catalog import (
    catalog_statistics,
    load_catalog,
    questions_for_security_domain,
    security_domain_totals,
    validate_catalog,
)
from maturity.config.loader import get_unanswered_label
from maturity.models.answers import load_answers
from maturity.scoring import aggregate_overall
from maturity.utils.error_handler import EngineError, exit_with_error


logger = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--catalog",
        dest="catalog_path",
        default=os.getenv("MATURITY_CATALOG_PATH", "data/taxonomy.yaml"),
        help="Path to the taxonomy file (.yaml/.yml/.json)",
    )
    parser.add_argument(
        "--security-domain",
        dest="security_domain",
        default=os.getenv("MATURITY_SECURITY_DOMAIN", ""),
        help="Restrict the active questions to one security domain id",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=os.getenv("MATURITY_LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--dotenv",
        dest="dotenv_path",
        default=".env",
        help="Path to .env file to load (default: .env at repo root)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maturity-engine score",
        description="Score an assessment: overall metrics, critical gaps, framework coverage and roadmap",
    )
    _add_common_arguments(parser)

    parser.add_argument(
        "--answers",
        dest="answers_path",
        required=True,
        help="Path to the answer snapshot (.json)",
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        default="",
        help="Optional output JSON file path. If not set, writes to outputs/.",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=os.getenv("MATURITY_OUTPUT_DIR", "outputs"),
        help="Directory to save outputs when --output is not set.",
    )
    parser.add_argument(
        "--max-roadmap-items",
        dest="max_roadmap_items",
        type=int,
        default=None,
        help="Maximum number of roadmap actions (default from engine config).",
    )

    return parser


def build_stats_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maturity-engine stats",
        description="Print question counts for a catalog as JSON",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--output",
        dest="output_path",
        default="",
        help="Optional output JSON file path. If not set, prints to stdout.",
    )
    return parser


def _configure_logging(log_level: str) -> None:
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.basicConfig(level=level)
    logging.getLogger("maturity").setLevel(level)

    # Library events go through stdlib logging (stderr), keeping stdout for JSON output.
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def run_score(
    catalog_path: str,
    answers_path: str,
    security_domain: str = "",
    output_path: str = "",
    output_dir: str = "outputs",
    max_roadmap_items: Optional[int] = None,
) -> int:
    catalog = load_catalog(Path(catalog_path))
    for issue in validate_catalog(catalog):
        logger.warning("[catalog] %s", issue)

    answers = load_answers(Path(answers_path))
    active_questions = questions_for_security_domain(catalog, security_domain or None)

    run_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]
    if output_path:
        output_file = Path(output_path)
    else:
        output_file = Path(output_dir) / f"maturity_{Path(catalog_path).stem}_{run_id}.json"

    logger.info("[run] catalog=%s answers=%s output=%s", catalog_path, answers_path, str(output_file))
    logger.info("[run] active_questions=%s answers=%s", len(active_questions), len(answers))

    overall = aggregate_overall(answers, active_questions, catalog)
    gaps = detect_critical_gaps(answers, active_questions, catalog)
    coverage = framework_coverage(answers, active_questions, catalog)
    roadmap = generate_roadmap(answers, active_questions, catalog, max_items=max_roadmap_items)

    logger.info(
        "[score] overall=%.2f%% coverage=%.2f%% gaps=%s roadmap=%s",
        overall.overall_score * 100,
        overall.coverage * 100,
        len(gaps),
        len(roadmap),
    )

    unanswered_label = get_unanswered_label()
    payload: dict[str, Any] = {
        "run_id": run_id,
        "security_domain": security_domain or None,
        "overall": overall.to_dict(),
        "critical_gaps": [g.to_dict(unanswered_label) for g in gaps],
        "framework_coverage": [fc.to_dict() for fc in coverage],
        "roadmap": [item.to_dict() for item in roadmap],
    }
    if security_domain:
        payload["security_domain_totals"] = security_domain_totals(catalog, security_domain)

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(text, encoding="utf-8")
    logger.info("[output] wrote=%s", str(output_file))

    return 0


def run_stats(catalog_path: str, security_domain: str = "", output_path: str = "") -> int:
    catalog = load_catalog(Path(catalog_path))
    for issue in validate_catalog(catalog):
        logger.warning("[catalog] %s", issue)

    questions = questions_for_security_domain(catalog, security_domain or None)
    stats = catalog_statistics(catalog, questions)
    if security_domain:
        stats["security_domain_totals"] = security_domain_totals(catalog, security_domain)

    text = json.dumps(stats, indent=2, ensure_ascii=False)
    if not output_path:
        print(text)
        return 0

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(text, encoding="utf-8")
    logger.info("[output] wrote=%s", str(output_file))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    argv_list = list(argv) if argv is not None else sys.argv[1:]

    if argv_list and argv_list[0] == "stats":
        args = build_stats_parser().parse_args(argv_list[1:])
        _configure_logging(args.log_level)
        load_dotenv(args.dotenv_path)

        try:
            return run_stats(
                catalog_path=args.catalog_path,
                security_domain=args.security_domain,
                output_path=args.output_path,
            )
        except EngineError as e:
            return exit_with_error(e, context="stats")

    if argv_list and argv_list[0] == "score":
        argv_list = argv_list[1:]

    args = build_parser().parse_args(argv_list)
    _configure_logging(args.log_level)
    load_dotenv(args.dotenv_path)

    try:
        return run_score(
            catalog_path=args.catalog_path,
            answers_path=args.answers_path,
            security_domain=args.security_domain,
            output_path=args.output_path,
            output_dir=args.output_dir,
            max_roadmap_items=args.max_roadmap_items,
        )
    except EngineError as e:
        return exit_with_error(e, context="score")


if __name__ == "__main__":
    raise SystemExit(main())
