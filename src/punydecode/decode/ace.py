"""Decoding of single labels that may carry the ACE prefix."""

from __future__ import annotations

from punydecode.core.bootstring import decode_label

ACE_PREFIX: str = "xn--"

# Code points whose full lowercase mapping is longer than one code point.
_SIMPLE_LOWER: dict[str, str] = {"\u0130": "i"}


def has_ace_prefix(label: str) -> bool:
    """Return True if ``label`` starts with ``xn--`` in any letter case."""

    return label[: len(ACE_PREFIX)].lower() == ACE_PREFIX


def lower_code_points(text: str) -> str:
    """
    Lowercase ``text`` one code point at a time.

    Each code point maps to exactly one code point, with no context rules:
    U+0130 becomes ``"i"`` and a word-final ``"Σ"`` becomes ``"σ"``.
    """

    return "".join(_SIMPLE_LOWER.get(ch) or ch.lower() for ch in text)


def decode_ace_label(label: str) -> str:
    """
    Decode one label.

    Labels without the ACE prefix are returned verbatim. Prefixed labels are
    Punycode-decoded and lowercased; decode errors propagate unchanged.

    Usage example
    -------------
        decode_ace_label("xn--maana-pta")   # "mañana"
        decode_ace_label("com")             # "com"
    """

    if not has_ace_prefix(label):
        return label
    return lower_code_points(decode_label(label[len(ACE_PREFIX):]))
