"""Punycode decoding for IDN labels, host names and e-mail addresses."""

from punydecode.core.bootstring import decode_label
from punydecode.decode import decode_ace_label, decode_email, decode_hostname
from punydecode.errors.types import (
    DecodeError,
    InvalidInputError,
    NoAtSignInEmailError,
    NotBasicError,
    PunycodeOverflowError,
)
from punydecode.version import __version__

__all__ = [
    "__version__",
    "decode_label",
    "decode_ace_label",
    "decode_hostname",
    "decode_email",
    "DecodeError",
    "PunycodeOverflowError",
    "NotBasicError",
    "InvalidInputError",
    "NoAtSignInEmailError",
]
