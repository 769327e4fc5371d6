"""`punydecode label` command implementation."""

from __future__ import annotations

import argparse

from punydecode.core.bootstring import decode_label
from punydecode.cli.commands.common import add_values_subparser, decode_values


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    add_values_subparser(subparsers, "label", "Decode Punycode label bodies (no xn-- prefix).", run)


def run(args: argparse.Namespace) -> int:
    return decode_values(args.values, decode_label)
