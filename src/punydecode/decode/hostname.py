"""Host name decoding over the four IDNA label separators."""

from __future__ import annotations

from typing import List

from punydecode.decode.ace import ACE_PREFIX, decode_ace_label

# FULL STOP, IDEOGRAPHIC FULL STOP, FULLWIDTH FULL STOP, HALFWIDTH IDEOGRAPHIC FULL STOP
LABEL_SEPARATORS: tuple[str, ...] = (".", "\u3002", "\uff0e", "\uff61")


def is_separator(ch: str) -> bool:
    """Return True if ``ch`` terminates a label."""

    return ch in LABEL_SEPARATORS


def split_labels(host: str) -> List[str]:
    """
    Split a host name at every label separator.

    A trailing separator yields a trailing empty label, so ``"example.com."``
    splits into ``["example", "com", ""]``.
    """

    labels: List[str] = []
    start = 0
    for idx, ch in enumerate(host):
        if is_separator(ch):
            labels.append(host[start:idx])
            start = idx + 1
    labels.append(host[start:])
    return labels


def decode_hostname(host: str) -> str:
    """
    Decode every ACE-prefixed label of a host name.

    Hosts with no ``xn--`` anywhere are returned unchanged. Otherwise the
    labels are decoded one by one and rejoined with ``"."``, whichever
    separator the input used.

    Usage example
    -------------
        decode_hostname("xn--maana-pta。com")   # "mañana.com"
    """

    if ACE_PREFIX not in host.lower():
        return host
    return ".".join(decode_ace_label(label) for label in split_labels(host))
