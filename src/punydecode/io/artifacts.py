"""Artifact writing utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from punydecode.errors.types import DecodeResult, ItemStatus


def save_json(data: Any, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def save_results(results: Sequence[DecodeResult], path: Path, *, kind: str, run_id: str) -> Path:
    """Write batch results with per-status counts to ``path``."""

    save_json(
        {
            "run_id": run_id,
            "kind": kind,
            "counts": {status.value: sum(r.status == status for r in results) for status in ItemStatus},
            "results": [r.to_dict() for r in results],
        },
        path,
    )
    return path
