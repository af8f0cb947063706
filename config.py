"""
Centralized configuration for the Balanced Squads team generator.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_str_list(env_var: str, default: list[str]) -> list[str]:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    values = [x.strip() for x in raw.split(",") if x.strip()]
    return values or default


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Team structure
NUM_GROUPS = _parse_int("NUM_GROUPS", 3)
GROUP_NAMES: list[str] = _parse_str_list("GROUP_NAMES", ["Blues", "Whites", "Yellows"])

# Slots per group for each role (keys match domain.models.role.Role values)
ROLE_SLOTS_PER_GROUP: dict[str, int] = {
    "Defender": _parse_int("ROLE_SLOTS_DEFENDER", 3),
    "Midfielder": _parse_int("ROLE_SLOTS_MIDFIELDER", 2),
    "Forward": _parse_int("ROLE_SLOTS_FORWARD", 1),
}

ALLOCATION_SETTINGS: dict[str, Any] = {
    # Independent greedy attempts per generation round
    "max_attempts": _parse_int("MAX_ATTEMPTS", 50),
    # Random swap trials applied to the best attempt
    "refinement_iterations": _parse_int("REFINEMENT_ITERATIONS", 300),
    # Tie-break noise added to ratings when ordering candidate pools (0 disables)
    "rating_jitter": _parse_float("RATING_JITTER", 0.005),
}
