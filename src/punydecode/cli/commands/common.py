"""Shared helpers for the single-value decode commands."""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from punydecode.errors.types import DecodeError


def add_values_subparser(
    subparsers: argparse._SubParsersAction,
    name: str,
    help: str,  # noqa: A002
    handler: Callable[[argparse.Namespace], int],
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help)
    parser.add_argument("values", nargs="+", metavar="VALUE", help="Value(s) to decode.")
    parser.set_defaults(handler=handler)
    return parser


def decode_values(values: list[str], decode: Callable[[str], str]) -> int:
    """Print one decoded value per line; failures go to stderr and make the status 1."""
    status = 0
    for value in values:
        try:
            print(decode(value))
        except DecodeError as error:
            where = "" if error.position is None else f" at position {error.position}"
            print(f"error: {value!r}: {error}{where}", file=sys.stderr)
            status = 1
    return status
