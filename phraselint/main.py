"""
Command line entry point.

Usage: phraselint --entry ./i18n --ref en.json [--report text|json]
"""
import argparse
import json
import sys
import time
from typing import Dict, List, Optional

import structlog

from . import __version__
from .config import settings
from .logging_setup import logger, setup_logging
from .result import Err
from .schemas import Issue
from .services import phraselint

REPORT_FORMATS = ("none", "text", "json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phraselint",
        description="Tool for validating i18n files coming from Phrase",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--entry",
        metavar="<path>",
        default=settings.ENTRY,
        required=settings.ENTRY is None,
        help="entry point to where i18n files are i.e. `./i18n`",
    )
    parser.add_argument(
        "--ref",
        metavar="<locale-file>",
        default=settings.REF,
        help="reference locale file containing all the right keys and values (default: %(default)s)",
    )
    parser.add_argument(
        "--report",
        choices=REPORT_FORMATS,
        default="none",
        help="print the issues found to stdout (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=None, help="override PHRASELINT_LOG_LEVEL")
    return parser


def format_text_report(groups: Dict[str, List[Issue]]) -> str:
    lines = []
    for key, issues in groups.items():
        lines.append(f"{key}:")
        for it in issues:
            lines.append(f"  {it.file}: missing {', '.join(it.issue.props)} [{int(it.issue.code)}]")
    return "\n".join(lines)


def format_json_report(groups: Dict[str, List[Issue]]) -> str:
    payload = {key: [it.model_dump(mode="json") for it in issues] for key, issues in groups.items()}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    started = time.perf_counter()
    structlog.contextvars.bind_contextvars(entry=args.entry, ref=args.ref)
    try:
        result = phraselint(dir=args.entry, main_entry=args.ref)

        if isinstance(result, Err):
            logger.warning("lint_failed", code=int(result.error.code))
            print(result.error.message, file=sys.stderr)
            return 1

        groups = result.value
        if args.report == "text" and groups:
            print(format_text_report(groups))
        elif args.report == "json":
            print(format_json_report(groups))
        return 0
    finally:
        structlog.contextvars.unbind_contextvars("entry", "ref")
        print(f"Done: {(time.perf_counter() - started) * 1000:.3f}ms")


def run():
    sys.exit(main())
