"""Label, host name and e-mail decoders built on the bootstring core."""

from punydecode.decode.ace import ACE_PREFIX, decode_ace_label, has_ace_prefix
from punydecode.decode.email import decode_email
from punydecode.decode.hostname import LABEL_SEPARATORS, decode_hostname, is_separator, split_labels

__all__ = [
    "ACE_PREFIX",
    "LABEL_SEPARATORS",
    "decode_ace_label",
    "decode_email",
    "decode_hostname",
    "has_ace_prefix",
    "is_separator",
    "split_labels",
]
