"""Decode one batch item under the run/debug policy."""

from __future__ import annotations

from typing import Callable

from .reporter import BatchReport
from .types import DecodeError, DecodeResult, ItemStatus


def guarded_decode(
    decode: Callable[[str], str],
    item: str,
    *,
    index: int,
    report: BatchReport,
) -> DecodeResult:
    """
    Decode ``item`` and record the outcome in ``report``.

    Only ``DecodeError`` is caught. In debug mode it is re-raised after being
    recorded; in run mode it travels on the returned result.

    Usage example
    -------------
        result = guarded_decode(decode_hostname, "xn--UB4", index=0, report=report)
        result.error   # InvalidInputError('xn--UB4'...)
    """

    try:
        output = decode(item)
    except DecodeError as exc:
        result = DecodeResult(index=index, input=item, status=ItemStatus.FAILED, error=exc)
        report.record(result)
        if report.cfg.mode == "debug":
            raise
        return result

    result = DecodeResult(index=index, input=item, status=ItemStatus.OK, output=output)
    report.record(result)
    return result


def skip(item: str, *, index: int, report: BatchReport) -> DecodeResult:
    """Record ``item`` as skipped and return its result."""

    result = DecodeResult(index=index, input=item, status=ItemStatus.SKIPPED)
    report.record(result)
    return result
