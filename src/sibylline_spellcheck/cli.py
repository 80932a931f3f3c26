"""Command-line entry point: check the files matched by a glob and report misspellings.

Exit status is 0 when every file is clean, 1 when misspellings were found or
a file could not be checked, and 2 when the configuration is invalid.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_config
from .errors import ConfigError
from .providers import list_providers
from .report import ReportMode, StreamSink
from .runner import run

EXIT_OK = 0
EXIT_MISSPELLINGS = 1
EXIT_CONFIG_ERROR = 2


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sibylline-spellcheck",
        description="Report misspelled words in text files",
    )
    ap.add_argument("files", nargs="?", help="Glob of files to check (** is recursive)")
    ap.add_argument("--files", dest="files_option", metavar="GLOB", help="Same as FILES")
    ap.add_argument(
        "--include-regex",
        help="Only report misspellings inside matches of this regex "
        "(group 1 is used when the regex has groups)",
    )
    ap.add_argument("--allowlist", metavar="PATH", help="File of extra accepted words")
    ap.add_argument(
        "--word",
        action="append",
        default=[],
        help="Extra accepted word (repeatable)",
    )
    ap.add_argument(
        "--offsets",
        action="store_true",
        help="Report character offsets instead of line:column",
    )
    ap.add_argument("--provider", choices=list_providers(), help="Spelling provider")
    ap.add_argument("--workers", type=int, help="Number of files checked in parallel")
    ap.add_argument("--config", metavar="PATH", help="YAML config file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)
    sink = StreamSink(sys.stdout)

    overrides = {
        "files": args.files_option or args.files,
        "include_regex": args.include_regex,
        "allowlist": args.allowlist,
        "words": args.word or None,
        "report_mode": ReportMode.OFFSETS if args.offsets else None,
        "provider": args.provider,
        "workers": args.workers,
    }

    try:
        config = load_config(config_path=args.config, overrides=overrides)
        report = run(config, sink=sink)
    except (ConfigError, ValueError) as e:
        sink.set_result(True, str(e))
        return EXIT_CONFIG_ERROR

    return EXIT_MISSPELLINGS if report.outcome.failed else EXIT_OK
