"""Console + file logging and the per-item JSONL event log of a batch run."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .config import BatchConfig
from .types import DecodeResult

LOGGER_NAME = "punydecode"

_FILE_FORMAT = "%(asctime)s %(levelname)-7s run=%(run_id)s item=%(item)s %(message)s"


class _ItemFilter(logging.Filter):
    """Fill in ``run_id`` and ``item`` so the file format never fails."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self._run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.run_id = self._run_id
        if not hasattr(record, "item"):
            record.item = "-"
        return True


def configure_logging(cfg: BatchConfig) -> logging.Logger:
    """
    Attach a Rich console handler and a plain file handler to the package logger.

    Calling it again replaces the handlers of the previous run.

    Usage example
    -------------
        logger = configure_logging(cfg)
        logger.error("Cannot decode %r", host, extra={"item": 3})
    """

    cfg.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.filters.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addFilter(_ItemFilter(cfg.run_id))

    console = RichHandler(level=cfg.console_level, show_path=False, markup=False,
                          rich_tracebacks=cfg.mode == "debug")
    logger.addHandler(console)

    file_handler = logging.FileHandler(cfg.log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(file_handler)

    logger.debug("Logging to %s (mode=%s)", cfg.log_path, cfg.mode)
    return logger


@dataclass
class EventLog:
    """
    Appends one JSON object per decoded item.

    Each line holds ``time_utc``, ``run_id``, ``kind`` and the fields of
    ``DecodeResult.to_dict()``.
    """

    path: Path
    run_id: str
    kind: str

    @classmethod
    def for_config(cls, cfg: BatchConfig, kind: str) -> Optional["EventLog"]:
        if not cfg.write_jsonl:
            return None
        return cls(path=cfg.events_path, run_id=cfg.run_id, kind=kind)

    def write(self, result: DecodeResult) -> None:
        payload = {
            "time_utc": datetime.now(timezone.utc).isoformat(),
            "run_id": self.run_id,
            "kind": self.kind,
            **result.to_dict(),
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
