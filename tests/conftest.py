"""
Pytest fixtures for tests.

Centralized roster builders and configurations so individual test modules
don't redefine the standard 3 x (3 DF, 2 MID, 1 FW) setup.
"""

import pytest

from allocator import AllocationConfig
from domain.models.participant import Participant
from domain.models.role import Role
from domain.models.role_demand import RoleDemand

DF, MID, FW = Role.DEFENDER, Role.MIDFIELDER, Role.FORWARD

# =============================================================================
# CENTRALIZED CONSTANTS
# =============================================================================

GROUP_NAMES = ("Blues", "Whites", "Yellows")
"""Standard group names for three-group tests."""

STANDARD_SHAPE = {DF: 3, MID: 2, FW: 1}
"""Per-group role demand used by most tests (18 participants over 3 groups)."""


def make_participant(pid: str, rating: int, *roles: Role, name: str | None = None) -> Participant:
    """Helper to create a participant with a readable default name."""
    return Participant(id=pid, name=name or f"Player {pid}", rating=rating, roles=frozenset(roles))


def make_roster(spec: list[tuple[int, tuple[Role, ...]]], prefix: str = "p") -> list[Participant]:
    """Build a roster from (rating, roles) pairs, ids p00, p01, ..."""
    return [make_participant(f"{prefix}{i:02d}", rating, *roles) for i, (rating, roles) in enumerate(spec)]


@pytest.fixture
def standard_demand():
    return RoleDemand(STANDARD_SHAPE, num_groups=3)


@pytest.fixture
def standard_config(standard_demand):
    return AllocationConfig(role_demand=standard_demand, group_names=GROUP_NAMES)


@pytest.fixture
def single_role_roster():
    """
    18 single-role participants with ratings 1-5.

    Every greedy attempt yields the same group totals (19, 18, 17), and a
    perfectly balanced partition exists.
    """
    spec = (
        [(r, (DF,)) for r in (5, 5, 5, 3, 3, 3, 1, 1, 1)]
        + [(r, (MID,)) for r in (4, 4, 3, 3, 2, 2)]
        + [(r, (FW,)) for r in (3, 3, 3)]
    )
    return make_roster(spec)


@pytest.fixture
def versatile_roster():
    """
    18 participants with some multi-role players; always feasible.

    Counts: DF 9/9, MID 7/6, FW 4/3 qualified vs required.
    """
    spec = (
        [(r, (DF,)) for r in (5, 4, 4, 3, 3, 2, 2, 1)]
        + [(4, (DF, MID))]
        + [(r, (MID,)) for r in (5, 4, 3, 3, 2)]
        + [(4, (MID, FW))]
        + [(r, (FW,)) for r in (5, 3, 2)]
    )
    return make_roster(spec)


@pytest.fixture
def starved_roster():
    """
    Two groups of (1 DF, 1 MID, 1 FW) with a roster that passes the coverage
    precheck but can never be completed: three DF-only players for two DF slots.
    """
    spec = [
        (3, (DF,)),
        (3, (DF,)),
        (3, (DF,)),
        (3, (MID, FW)),
        (3, (MID, FW)),
        (3, (FW,)),
    ]
    return make_roster(spec)


@pytest.fixture
def starved_config():
    demand = RoleDemand({DF: 1, MID: 1, FW: 1}, num_groups=2)
    return AllocationConfig(role_demand=demand, group_names=("Home", "Away"))
