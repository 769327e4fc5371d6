"""Decode many inputs under the run/debug error-handling policy."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List

from punydecode.core.bootstring import decode_label
from punydecode.decode.email import decode_email
from punydecode.decode.hostname import decode_hostname
from punydecode.errors.guards import guarded_decode, skip
from punydecode.errors.reporter import BatchReport
from punydecode.errors.types import DecodeResult


class DecodeKind(str, Enum):
    """What each batch item is."""
    LABEL = "label"
    HOSTNAME = "hostname"
    EMAIL = "email"


_DECODERS: Dict[DecodeKind, Callable[[str], str]] = {
    DecodeKind.LABEL: decode_label,
    DecodeKind.HOSTNAME: decode_hostname,
    DecodeKind.EMAIL: decode_email,
}


def decoder_for(kind: DecodeKind | str) -> Callable[[str], str]:
    """Return the decode function for ``kind``."""

    return _DECODERS[DecodeKind(kind)]


def decode_many(items: Iterable[str], kind: DecodeKind | str, report: BatchReport) -> List[DecodeResult]:
    """
    Decode every item in order and record each outcome in ``report``.

    In run mode a failed item keeps its error and decoding continues; once
    ``max_failures`` is reached the remaining items are skipped. In debug
    mode the first failure is re-raised.

    Usage example
    -------------
        results = decode_many(["xn--maana-pta.com", "xn--UB4"], "hostname", report)
        [r.output for r in results]   # ["mañana.com", None]
    """

    decode = decoder_for(kind)
    results: List[DecodeResult] = []
    for index, item in enumerate(items):
        if report.max_failures_reached():
            results.append(skip(item, index=index, report=report))
        else:
            results.append(guarded_decode(decode, item, index=index, report=report))

    report.logger.info("Decoded %d/%d item(s)", sum(r.ok for r in results), len(results))
    return results
