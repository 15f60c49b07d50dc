"""Command-line interface for openapi-postprocessing."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .settings import default_config_path


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openapi-postprocess",
        description="Apply post-processing visitors to a generated OpenAPI document",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"openapi-postprocess {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    process_parser = subparsers.add_parser(
        "process",
        help="Post-process a JSON or YAML document",
    )
    process_parser.add_argument(
        "input",
        type=Path,
        help="Document to post-process (.json, .yaml or .yml)",
    )
    process_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the result here instead of stdout",
    )
    process_parser.add_argument(
        "--config",
        type=Path,
        default=default_config_path(),
        help="Settings path (default: ~/.config/openapi-postprocessing/settings.json)",
    )
    process_parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        help="Output format (default: inferred from --output, else settings)",
    )
    process_parser.add_argument(
        "--property-visitor",
        action="append",
        metavar="NAME",
        help="Property visitor to run, in order (repeatable; replaces configured list)",
    )
    process_parser.add_argument(
        "--no-property-visitors",
        action="store_true",
        help="Skip the property phase",
    )
    process_parser.add_argument(
        "--drop-deprecated",
        action="store_true",
        help="Remove deprecated operations",
    )
    process_parser.add_argument(
        "--drop-tag",
        action="append",
        metavar="TAG",
        help="Remove operations with this tag (repeatable)",
    )
    process_parser.add_argument(
        "--drop-path",
        action="append",
        metavar="GLOB",
        help="Remove operations on paths matching this pattern (repeatable)",
    )
    process_parser.add_argument(
        "--drop-method",
        action="append",
        metavar="METHOD",
        help="Remove operations for this HTTP method (repeatable)",
    )
    process_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary of the run to stderr",
    )
    process_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as machine-readable JSON",
    )

    visitors_parser = subparsers.add_parser(
        "visitors",
        help="List built-in property visitors",
    )
    visitors_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    load_dotenv()
    _configure_logging(args.verbose)

    try:
        if args.command == "process":
            from .commands.process import run_process
            from .settings import load_settings
            return run_process(args, settings=load_settings(args.config))
        elif args.command == "visitors":
            from .commands.visitors import run_visitors
            return run_visitors(args)
        else:
            parser.print_help()
            return 1
    except Exception as exc:
        from .errors import exit_code_for_exception

        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return exit_code_for_exception(exc)


if __name__ == "__main__":
    sys.exit(main())
