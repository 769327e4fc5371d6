"""punydecode command-line interface entrypoint."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from punydecode.cli.commands import batch, email, hostname, label
from punydecode.errors.config import ConfigError
from punydecode.version import __version__

# Each module registers one subcommand and binds ``handler`` to its ``run``.
COMMAND_MODULES = (label, hostname, email, batch)

EXIT_CONFIG_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="punydecode",
        description="Decode Punycode (RFC 3492) labels, host names and e-mail addresses.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")
    for module in COMMAND_MODULES:
        module.add_subparser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one subcommand and return its exit status."""
    args = build_arg_parser().parse_args(argv)
    try:
        return args.handler(args)
    except ConfigError as error:
        print(f"punydecode {args.command}: {error}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


def app() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    app()
