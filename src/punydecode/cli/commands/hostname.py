"""`punydecode hostname` command implementation."""

from __future__ import annotations

import argparse

from punydecode.decode.hostname import decode_hostname
from punydecode.cli.commands.common import add_values_subparser, decode_values


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    add_values_subparser(subparsers, "hostname", "Decode host names.", run)


def run(args: argparse.Namespace) -> int:
    return decode_values(args.values, decode_hostname)
