"""
JSONL tracing for generation rounds.

Set DEBUG_LOG_PATH to record every new best search attempt and every accepted
refinement swap. Entries from one round share a run id derived from its seed.
"""

from __future__ import annotations

import json
import os
import time
from typing import Any


def round_run_id(seed: int | None) -> str:
    """Run id grouping the trace entries of one round."""
    return "unseeded" if seed is None else f"seed-{seed}"


def debug_log(
    location: str,
    message: str,
    data: dict[str, Any] | None = None,
    *,
    run_id: str = "unseeded",
) -> None:
    """
    Append one trace entry to DEBUG_LOG_PATH; does nothing when unset.

    Write failures are ignored so tracing can stay enabled on read-only hosts.
    """
    path = os.getenv("DEBUG_LOG_PATH")
    if not path:
        return

    entry = {
        "runId": run_id,
        "timestamp": int(time.time() * 1000),
        "location": location,
        "message": message,
        "data": data or {},
    }
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError:
        return
