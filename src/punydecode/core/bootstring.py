# src/punydecode/core/bootstring.py

"""Punycode (RFC 3492) label decoder with 32-bit overflow checks."""

from __future__ import annotations

from typing import List, Union

import numpy as np

from punydecode.errors.types import InvalidInputError, NotBasicError, PunycodeOverflowError


# ##########  RFC 3492 parameters  ##########

BASE: int = 36
TMIN: int = 1
TMAX: int = 26
SKEW: int = 38
DAMP: int = 700
INITIAL_BIAS: int = 72
INITIAL_N: int = 128
DELIMITER: str = "-"

# Accumulator ceiling: every intermediate value must fit a signed 32-bit int.
MAX_INT: int = int(np.iinfo(np.int32).max)

_BASE_MINUS_TMIN: int = BASE - TMIN

REPLACEMENT_CHARACTER: str = "\ufffd"
_MAX_CODE_POINT: int = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def basic_to_digit(ch: str) -> int:
    """Return the digit value of a basic code point, or ``BASE`` if it is not a digit."""

    if "0" <= ch <= "9":
        return ord(ch) - 22
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    return BASE


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """
    Bias adaptation function (RFC 3492 section 6.1).

    Operands are non-negative, so floor division matches the truncating
    division of the reference algorithm.
    """

    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points
    k = 0
    while delta > _BASE_MINUS_TMIN * TMAX // 2:
        delta //= _BASE_MINUS_TMIN
        k += BASE
    return k + (_BASE_MINUS_TMIN + 1) * delta // (delta + SKEW)


def _threshold(k: int, bias: int) -> int:
    return min(max(k - bias, TMIN), TMAX)


def _to_char(cp: int) -> str:
    # Surrogates and values past U+10FFFF are not Unicode scalar values.
    if cp > _MAX_CODE_POINT or cp in _SURROGATES:
        return REPLACEMENT_CHARACTER
    return chr(cp)


def decode_label(encoded: Union[str, bytes]) -> str:
    """
    Decode a Punycode label body (without the ``xn--`` prefix).

    Parameters
    ----------
    encoded
        The encoded label. ``bytes`` are read one character per byte.

    Returns
    -------
    decoded
        The Unicode label, returned as-is (no case mapping).

    Raises
    ------
    NotBasicError
        A code point >= 0x80 precedes the last delimiter.
    PunycodeOverflowError
        An invalid digit was read or an accumulator would exceed ``MAX_INT``.
    InvalidInputError
        The input ends in the middle of a variable-length integer.

    Usage example
    -------------
        decode_label("bcher-kva")   # "bücher"
    """

    s = encoded.decode("latin-1") if isinstance(encoded, bytes) else encoded
    size = len(s)

    basic = s.rfind(DELIMITER)
    output: List[int] = []
    for idx in range(basic):
        cp = ord(s[idx])
        if cp >= 0x80:
            raise NotBasicError(s, position=idx)
        output.append(cp)

    i, n, bias, pos = 0, INITIAL_N, INITIAL_BIAS, basic + 1

    while pos < size:
        oldi, w, k = i, 1, BASE
        while True:
            digit = basic_to_digit(s[pos])
            pos += 1

            if digit >= BASE or digit > (MAX_INT - i) // w:
                raise PunycodeOverflowError(s, position=pos - 1)

            i += digit * w

            t = _threshold(k, bias)
            if digit < t:
                break

            if pos == size:
                raise InvalidInputError(s, position=pos)

            base_minus_t = BASE - t
            if w > MAX_INT // base_minus_t:
                raise PunycodeOverflowError(s, position=pos)

            w *= base_minus_t
            k += BASE

        out = len(output) + 1
        bias = adapt(i - oldi, out, oldi == 0)

        if i // out > MAX_INT - n:
            raise PunycodeOverflowError(s, position=pos)

        n += i // out
        i %= out

        output.insert(i, n)
        i += 1

    return "".join(map(_to_char, output))
