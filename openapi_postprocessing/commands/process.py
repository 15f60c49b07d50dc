"""Process command - post-process a document file."""

from __future__ import annotations

from argparse import Namespace
from dataclasses import replace
import logging
import sys

from ..errors import ValidationError
from ..io import dump_document, format_for_path, load_document, write_document
from ..registry import build_post_processor
from ..settings import Settings, validate_output_format
from .output import document_stats, emit_output

logger = logging.getLogger(__name__)


def apply_cli_overrides(settings: Settings, args: Namespace) -> Settings:
    """Layer command-line flags over loaded settings.

    Repeatable flags replace the configured list when given at least once.
    """
    overrides: dict = {}
    if getattr(args, "no_property_visitors", False):
        if getattr(args, "property_visitor", None):
            raise ValidationError("--property-visitor cannot be combined with --no-property-visitors")
        overrides["property_visitors"] = ()
    elif getattr(args, "property_visitor", None):
        overrides["property_visitors"] = tuple(args.property_visitor)
    if getattr(args, "drop_deprecated", False):
        overrides["drop_deprecated"] = True
    if getattr(args, "drop_tag", None):
        overrides["drop_tags"] = tuple(args.drop_tag)
    if getattr(args, "drop_path", None):
        overrides["drop_paths"] = tuple(args.drop_path)
    if getattr(args, "drop_method", None):
        overrides["drop_methods"] = tuple(args.drop_method)
    if getattr(args, "format", None):
        overrides["output_format"] = validate_output_format(args.format)
    elif getattr(args, "output", None) is not None:
        overrides["output_format"] = format_for_path(args.output)
    return replace(settings, **overrides)


def run_process(
    args: Namespace,
    *,
    settings: Settings | None = None,
    document_sink=None,
    output_sink=None,
) -> int:
    """Load, post-process and write one document.

    The document goes to ``args.output`` or, when unset, to
    ``document_sink`` (stdout). The run summary goes to ``output_sink``
    (stderr), so it never mixes with a document written to stdout.
    """
    if settings is None:
        raise ValidationError("settings are required; load them in the CLI composition root")
    if document_sink is None:
        document_sink = sys.stdout.write
    if output_sink is None:
        output_sink = _print_stderr

    settings = apply_cli_overrides(settings, args)
    processor = build_post_processor(settings)
    logger.info("Post-processing %s with %r", args.input, processor)

    document = load_document(args.input)
    before = document_stats(document)
    processor.process(document)
    after = document_stats(document)

    if args.output is not None:
        write_document(document, args.output, settings.output_format)
        destination = str(args.output)
    else:
        document_sink(dump_document(document, settings.output_format))
        destination = "-"

    payload = {
        "input": str(args.input),
        "output": destination,
        "format": settings.output_format,
        "before": before,
        "after": after,
    }
    if getattr(args, "json", False) or getattr(args, "summary", False):
        emit_output(
            command="process",
            payload=payload,
            json_output=getattr(args, "json", False),
            output_sink=output_sink,
            human_lines=(
                f"process: paths {before['paths']} -> {after['paths']}",
                f"process: operations {before['operations']} -> {after['operations']}",
                f"process: wrote {destination} ({settings.output_format})",
            ),
        )
    return 0


def _print_stderr(line: str) -> None:
    print(line, file=sys.stderr)
