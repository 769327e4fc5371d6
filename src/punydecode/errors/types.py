from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# ##########  Decode errors  ##########


class DecodeError(ValueError):
    """
    Base class for every error raised while decoding.

    ``args`` holds ``(input, position)`` so the error survives pickling; the
    message comes from the class.

    Attributes
    ----------
    input
        The string that failed to decode.
    position
        Offset into ``input`` where decoding stopped, when known.
    """

    default_message = "decode error"

    def __init__(self, input: str, position: Optional[int] = None) -> None:  # noqa: A002
        super().__init__(input, position)
        self.input = input
        self.position = position

    def __str__(self) -> str:
        return self.default_message


class PunycodeOverflowError(DecodeError):
    """An invalid digit was read or the 32-bit accumulator would overflow."""

    default_message = "overflow: input needs wider integers to process"


class NotBasicError(DecodeError):
    """A code point >= 0x80 appears before the last delimiter."""

    default_message = "illegal input >= 0x80 (not a basic code point)"


class InvalidInputError(DecodeError):
    """The input ended inside a variable-length integer."""

    default_message = "invalid input"


class NoAtSignInEmailError(DecodeError):
    """An e-mail address has no ``@``."""

    default_message = "no at sign in the e-mail address"


# ##########  Batch item outcomes  ##########


class ItemStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding one batch item.

    ``output`` is set for OK items and ``error`` for FAILED ones; SKIPPED
    items carry neither.

    Usage example
    -------------
        DecodeResult(index=0, input="tda", status=ItemStatus.OK, output="ü")
    """

    index: int
    input: str
    status: ItemStatus
    output: Optional[str] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.status == ItemStatus.OK

    @property
    def error_type(self) -> Optional[str]:
        return type(self.error).__name__ if self.error is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "input": self.input,
            "status": self.status.value,
            "output": self.output,
            "error_type": self.error_type,
            "error": str(self.error) if self.error is not None else None,
            "position": self.error.position if self.error is not None else None,
        }
