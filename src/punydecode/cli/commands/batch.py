"""`punydecode batch` command implementation."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List

from punydecode.errors import BatchConfig, BatchReport, ConfigError, EventLog, configure_logging, load_config
from punydecode.io.artifacts import save_results
from punydecode.pipeline.batch import DecodeKind, decode_many


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("batch", help="Decode a file with one item per line.")
    parser.add_argument("--input", required=True, help="Text file, one label/host/address per line.")
    parser.add_argument("--kind", choices=[k.value for k in DecodeKind], default=None,
                        help="What each line is (default: hostname).")
    parser.add_argument("--out-dir", default=None, help="Directory for decoded.json.")
    parser.add_argument("--mode", choices=["debug", "run"], default=None, help="Error-handling mode.")
    parser.add_argument("--log-dir", default=None, help="Directory for the run log and event file.")
    parser.add_argument("--max-failures", type=int, default=None, help="Skip remaining items after N failures.")
    parser.set_defaults(handler=run)


def _read_items(path: Path) -> List[str]:
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as error:
        raise ConfigError(f"Cannot read input file {path}: {error.strerror}") from error
    return [line.strip() for line in lines if line.strip()]


def run(args: argparse.Namespace) -> int:
    cfg = BatchConfig.resolve(
        file_config=load_config(Path.cwd()),
        env=os.environ,
        overrides={
            "kind": args.kind,
            "mode": args.mode,
            "out_dir": args.out_dir,
            "log_dir": args.log_dir,
            "max_failures": args.max_failures,
        },
    )
    try:
        kind = DecodeKind(cfg.kind)
    except ValueError as error:
        raise ConfigError(f"kind must be one of {[k.value for k in DecodeKind]}, got {cfg.kind!r}.") from error
    results_path = cfg.results_path
    items = _read_items(Path(args.input))

    logger = configure_logging(cfg)
    report = BatchReport(cfg=cfg, logger=logger, events=EventLog.for_config(cfg, kind.value))
    logger.info("Decoding %d %s item(s) from %s", len(items), kind.value, args.input)

    results = decode_many(items, kind, report)
    save_results(results, results_path, kind=kind.value, run_id=cfg.run_id)
    logger.info("Results written to %s", results_path)

    report.print_summary()
    return report.exit_code()
