"""Layered configuration for batch decoding: YAML file, environment, command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping, Optional
import logging
import uuid

import yaml


class ConfigError(ValueError):
    """Raised when required runtime configuration is missing or invalid."""


CONFIG_FILENAMES: tuple[str, ...] = ("punydecode.yaml", "config.yaml")
ENV_PREFIX = "PUNYDECODE_"
RESULTS_FILENAME = "decoded.json"

_FIELDS: tuple[str, ...] = ("kind", "mode", "out_dir", "log_dir", "run_id", "write_jsonl", "max_failures")
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def load_config(root: Path) -> dict[str, Any]:
    """
    Load punydecode config from a directory if present.

    Search order:
    1) ``punydecode.yaml``
    2) ``config.yaml``
    """

    for filename in CONFIG_FILENAMES:
        config_path = root / filename
        if not config_path.exists():
            continue
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as error:
            raise ConfigError(f"Could not parse {config_path}: {error}") from error
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path} must contain a mapping at the top level.")
        return data
    return {}


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}.")


def _as_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as error:
        raise ConfigError(f"{name} must be an integer, got {value!r}.") from error


def _coerce(raw: Mapping[str, Any]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name, value in raw.items():
        if name in ("out_dir", "log_dir"):
            values[name] = Path(str(value))
        elif name == "write_jsonl":
            values[name] = _as_bool(name, value)
        elif name == "max_failures":
            values[name] = _as_int(name, value)
        elif name == "mode":
            values[name] = str(value).strip().lower()
        else:
            values[name] = str(value).strip()
    return values


@dataclass(frozen=True)
class BatchConfig:
    """
    Settings of one ``punydecode batch`` run.

    Parameters
    ----------
    kind
        What each input line is: "label", "hostname" or "email".
    mode
        "debug" re-raises the first decode error; "run" records it and moves on.
    out_dir
        Directory that receives ``decoded.json``.
    log_dir
        Directory for ``run_<run_id>.log`` and ``events_<run_id>.jsonl``.
    run_id
        Identifier shared by the log, the event file and the results file.
    write_jsonl
        Write one JSON event per decoded item.
    max_failures
        In run mode, skip the remaining items once this many have failed.
    console_level
        Logging level of the console handler.

    Usage example
    -------------
        cfg = BatchConfig.resolve(file_config=load_config(Path.cwd()), env=os.environ,
                                  overrides={"out_dir": "out"})
    """

    kind: str = "hostname"
    mode: Literal["debug", "run"] = "run"
    out_dir: Optional[Path] = None
    log_dir: Path = Path("logs")
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:10])
    write_jsonl: bool = True
    max_failures: Optional[int] = None
    console_level: int = logging.INFO

    def __post_init__(self) -> None:
        if self.mode not in ("debug", "run"):
            raise ConfigError(f"mode must be 'debug' or 'run', got {self.mode!r}.")
        if self.max_failures is not None and self.max_failures < 1:
            raise ConfigError(f"max_failures must be at least 1, got {self.max_failures}.")
        if not self.run_id:
            raise ConfigError("run_id must not be empty.")

    @property
    def log_path(self) -> Path:
        return self.log_dir / f"run_{self.run_id}.log"

    @property
    def events_path(self) -> Path:
        return self.log_dir / f"events_{self.run_id}.jsonl"

    @property
    def results_path(self) -> Path:
        if self.out_dir is None:
            raise ConfigError(
                "No out_dir provided. Pass --out-dir, set PUNYDECODE_OUT_DIR, "
                "or add batch.out_dir to punydecode.yaml."
            )
        return self.out_dir / RESULTS_FILENAME

    @classmethod
    def resolve(
        cls,
        *,
        file_config: Optional[Mapping[str, Any]] = None,
        env: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> "BatchConfig":
        """
        Merge settings; later sources win.

        1) ``paths.out_dir`` and the ``batch:`` section of the config file
        2) ``PUNYDECODE_<FIELD>`` environment variables (empty values ignored)
        3) ``overrides`` from the command line (``None`` values ignored)
        """

        file_config = file_config or {}
        raw: dict[str, Any] = {}

        paths = file_config.get("paths")
        if isinstance(paths, dict) and paths.get("out_dir"):
            raw["out_dir"] = paths["out_dir"]

        section = file_config.get("batch") or {}
        if not isinstance(section, dict):
            raise ConfigError("The 'batch' config section must be a mapping.")
        unknown = sorted(set(section) - set(_FIELDS))
        if unknown:
            raise ConfigError(f"Unknown batch setting(s): {', '.join(unknown)}.")
        raw.update(section)

        for name in _FIELDS:
            value = (env or {}).get(ENV_PREFIX + name.upper(), "")
            if value.strip():
                raw[name] = value

        raw.update({k: v for k, v in (overrides or {}).items() if v is not None})
        return cls(**_coerce(raw))
