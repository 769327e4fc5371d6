"""Tallies batch outcomes and renders the end-of-run report."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.table import Table

from .config import BatchConfig
from .logging import EventLog
from .types import DecodeResult, ItemStatus


@dataclass
class BatchReport:
    """
    Receives every ``DecodeResult`` of a run, logs it and keeps the tallies.

    Usage example
    -------------
        report = BatchReport(cfg=cfg, logger=logger, events=EventLog.for_config(cfg, "hostname"))
        report.record(result)
        report.print_summary()
    """

    cfg: BatchConfig
    logger: logging.Logger
    events: Optional[EventLog] = None
    _results: list[DecodeResult] = field(default_factory=list, init=False, repr=False)
    _counts: Counter = field(default_factory=Counter, init=False, repr=False)

    def record(self, result: DecodeResult) -> None:
        self._results.append(result)
        self._counts[result.status] += 1

        extra = {"item": result.index}
        if result.status == ItemStatus.OK:
            self.logger.debug("%r -> %r", result.input, result.output, extra=extra)
        elif result.status == ItemStatus.FAILED:
            self.logger.error(
                "Cannot decode %r: %s (%s, position=%s)",
                result.input,
                result.error,
                result.error_type,
                result.error.position if result.error is not None else None,
                extra=extra,
            )
        else:
            self.logger.warning("Skipped %r: max_failures=%s reached", result.input, self.cfg.max_failures, extra=extra)

        if self.events is not None:
            self.events.write(result)

    @property
    def results(self) -> list[DecodeResult]:
        return list(self._results)

    def count(self, status: ItemStatus) -> int:
        return self._counts[status]

    def max_failures_reached(self) -> bool:
        """True once ``max_failures`` items failed; never in debug mode."""
        limit = self.cfg.max_failures
        return self.cfg.mode == "run" and limit is not None and self.count(ItemStatus.FAILED) >= limit

    def failures(self) -> list[DecodeResult]:
        return [r for r in self._results if r.status == ItemStatus.FAILED]

    def render_summary(self) -> str:
        """Plain-text report: counts, one line per failed item, artifact paths."""
        lines = [
            f"Decoded {len(self._results)} {self.cfg.kind} item(s) (run_id={self.cfg.run_id}, mode={self.cfg.mode})",
            f"  ok={self.count(ItemStatus.OK)} failed={self.count(ItemStatus.FAILED)} "
            f"skipped={self.count(ItemStatus.SKIPPED)}",
        ]
        for r in self.failures():
            lines.append(f"  [{r.index}] {r.input!r}: {r.error_type}: {r.error}")
        lines.append(f"  log: {self.cfg.log_path}")
        if self.events is not None:
            lines.append(f"  events: {self.events.path}")
        return "\n".join(lines)

    def print_summary(self, console: Optional[Console] = None) -> None:
        """Print the counts and a table of failed items."""
        console = console or Console(stderr=True)
        console.print(self.render_summary().splitlines()[0], markup=False, highlight=False)

        table = Table(show_header=True, header_style="bold")
        table.add_column("status")
        table.add_column("items", justify="right")
        for status in ItemStatus:
            table.add_row(status.value, str(self.count(status)))
        console.print(table)

        failed = self.failures()
        if failed:
            errors = Table(title="Failed items", show_header=True, header_style="bold red")
            errors.add_column("#", justify="right")
            errors.add_column("input")
            errors.add_column("error")
            errors.add_column("position", justify="right")
            for r in failed:
                position = r.error.position if r.error is not None else None
                errors.add_row(str(r.index), r.input, f"{r.error_type}: {r.error}", "-" if position is None else str(position))
            console.print(errors)

    def exit_code(self) -> int:
        """0 when no item failed, else 1."""
        return 1 if self.count(ItemStatus.FAILED) else 0
