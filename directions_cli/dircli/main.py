"""Command-line entrypoint -- validates Directions API JSON round trips."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from dircli.config import load_options
from dircli.sdk.codec import CODECS, get_codec
from dircli.validator.inputs import (
    InputNotFound,
    InputSelector,
    PathSelector,
    StdinSelector,
    StringSelector,
)
from dircli.validator.pipeline import validate
from dircli.validator.report import report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="directions-validator",
        description=(
            "Decode Directions API responses into the typed response model, "
            "encode them again and check that the bytes match. Prints a JSON "
            "array with one result per input."
        ),
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", type=Path, help="JSON file to validate")
    source.add_argument(
        "-d",
        "--dir",
        type=Path,
        help="Directory to walk recursively; every regular file is validated",
    )
    source.add_argument("-j", "--json", help="Inline JSON string to validate")
    source.add_argument(
        "-s",
        "--stdin",
        action="store_true",
        help="Read a single JSON payload from standard input",
    )
    parser.add_argument(
        "-p",
        "--pretty",
        action="store_true",
        help="Indent the report and colour it by the overall result",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when any input decodes but does not convert back byte-for-byte",
    )
    parser.add_argument(
        "-m",
        "--model",
        choices=sorted(CODECS),
        default=None,
        help="Response model to decode into (default: directions)",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Validate inputs on this many threads (default: 1)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress and decode failures to stderr",
    )
    return parser


def _wants_help(argv: Sequence[str] | None) -> bool:
    """Detect -h/--help anywhere on the command line, before other flags are checked."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("-h", "--help", action="store_true")
    known, _ = pre.parse_known_args(argv)
    return known.help


def _selector_from_args(args: argparse.Namespace) -> InputSelector:
    if args.file is not None:
        return PathSelector(path=args.file)
    if args.dir is not None:
        return PathSelector(path=args.dir)
    if args.json is not None:
        return StringSelector(text=args.json)
    return StdinSelector()


def _configure_logging(verbose: bool) -> None:
    dev_mode = os.environ.get("DIRCLI_DEV_MODE", "").lower() == "true"
    logging.basicConfig(
        level=logging.DEBUG if verbose or dev_mode else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the validator and return the process exit code."""
    parser = build_parser()
    if _wants_help(argv):
        parser.print_help()
        return 0
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        options = load_options(
            {
                "strict": args.strict,
                "pretty": args.pretty,
                "model": args.model,
                "workers": args.workers,
            }
        )
    except ValueError as e:
        parser.error(str(e))

    logger.debug("Options: %s", options.model_dump())
    codec = get_codec(options.model)

    try:
        results, verdict = validate(
            _selector_from_args(args),
            codec,
            strict=options.strict,
            workers=options.workers,
        )
    except InputNotFound as e:
        parser.error(str(e))

    return report(results, verdict, pretty=options.pretty)


if __name__ == "__main__":
    sys.exit(main())
