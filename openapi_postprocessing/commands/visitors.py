"""Visitors command - list built-in property visitors."""

from __future__ import annotations

from argparse import Namespace

from ..registry import PROPERTY_VISITORS
from ..settings import DEFAULT_PROPERTY_VISITORS
from .output import emit_output


def run_visitors(args: Namespace, *, output_sink=print) -> int:
    names = sorted(PROPERTY_VISITORS)
    emit_output(
        command="visitors",
        payload={"property_visitors": names, "default": list(DEFAULT_PROPERTY_VISITORS)},
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=[
            f"{name}{' (default)' if name in DEFAULT_PROPERTY_VISITORS else ''}"
            for name in names
        ],
    )
    return 0
