"""`punydecode email` command implementation."""

from __future__ import annotations

import argparse

from punydecode.decode.email import decode_email
from punydecode.cli.commands.common import add_values_subparser, decode_values


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    add_values_subparser(subparsers, "email", "Decode the domain part of e-mail addresses.", run)


def run(args: argparse.Namespace) -> int:
    return decode_values(args.values, decode_email)
