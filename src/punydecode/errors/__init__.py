"""
errors subpackage: decode error kinds, and the config, logging and reporting
that batch decoding runs under.

- DecodeError and its subclasses: the four ways a decode can fail
- BatchConfig: file < environment < command-line settings of a batch run
- configure_logging() / EventLog: Rich console + file log, per-item JSONL events
- BatchReport: tallies DecodeResults and prints the end-of-run report
- guarded_decode() / skip(): one item under the run/debug policy
"""

from .types import (
    DecodeError,
    DecodeResult,
    InvalidInputError,
    ItemStatus,
    NoAtSignInEmailError,
    NotBasicError,
    PunycodeOverflowError,
)
from .config import BatchConfig, ConfigError, load_config
from .logging import EventLog, configure_logging
from .reporter import BatchReport
from .guards import guarded_decode, skip

__all__ = [
    "DecodeError",
    "PunycodeOverflowError",
    "NotBasicError",
    "InvalidInputError",
    "NoAtSignInEmailError",
    "DecodeResult",
    "ItemStatus",
    "BatchConfig",
    "ConfigError",
    "load_config",
    "EventLog",
    "configure_logging",
    "BatchReport",
    "guarded_decode",
    "skip",
]
