"""E-mail address decoding: the domain part only."""

from __future__ import annotations

from punydecode.decode.hostname import decode_hostname
from punydecode.errors.types import NoAtSignInEmailError


def decode_email(address: str) -> str:
    """Decode the domain after the first ``@``; the local part is kept verbatim."""

    at = address.find("@")
    if at < 0:
        raise NoAtSignInEmailError(address)
    return address[: at + 1] + decode_hostname(address[at + 1:])
