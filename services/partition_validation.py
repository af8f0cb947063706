"""
Partition validation utilities.

Checks the structural invariants of a finished partition: every group is full,
every group matches the role demand, every binding is qualified, and every
roster participant appears exactly once.
"""

from collections import Counter

from domain.models.partition import Partition
from domain.models.role import Role
from domain.models.role_demand import RoleDemand
from services import error_codes
from services.result import Result


def validate_partition(partition: Partition, demand: RoleDemand) -> Result[Partition]:
    """
    Validate a partition against a role demand.

    Args:
        partition: Partition to check
        demand: Expected per-group role shape

    Returns:
        Result.ok(partition) if every invariant holds
        Result.fail(error, code, details) naming the first violation
    """
    if partition.num_groups != demand.num_groups:
        return Result.fail(
            f"Expected {demand.num_groups} groups, found {partition.num_groups}.",
            code=error_codes.GROUP_SIZE_MISMATCH,
            details={"expected": demand.num_groups, "actual": partition.num_groups},
        )

    for name, members, roles in zip(partition.group_names, partition.members, partition.slot_roles):
        if len(members) != demand.group_size:
            return Result.fail(
                f"Each team must have exactly {demand.group_size} players. "
                f"{name} has {len(members)}.",
                code=error_codes.GROUP_SIZE_MISMATCH,
                details={"group": name, "expected": demand.group_size, "actual": len(members)},
            )
        counts = Counter(roles)
        for role in Role:
            if counts.get(role, 0) != demand.slots_for(role):
                return Result.fail(
                    f"{name} has {counts.get(role, 0)} {role.value} slots, "
                    f"expected {demand.slots_for(role)}.",
                    code=error_codes.ROLE_SHAPE_MISMATCH,
                    details={
                        "group": name,
                        "role": role.value,
                        "expected": demand.slots_for(role),
                        "actual": counts.get(role, 0),
                    },
                )

    for group in partition.to_groups():
        for assignment in group.assignments:
            if not assignment.is_qualified:
                participant = assignment.participant
                return Result.fail(
                    f"{participant.name} is not qualified to play {assignment.role.value} in {group.name}.",
                    code=error_codes.UNQUALIFIED_ASSIGNMENT,
                    details={
                        "group": group.name,
                        "participant_id": participant.id,
                        "role": assignment.role.value,
                    },
                )

    placed = Counter(index for members in partition.members for index in members)
    missing = [p.id for i, p in enumerate(partition.roster) if placed.get(i, 0) == 0]
    duplicated = [partition.roster[i].id for i, n in placed.items() if n > 1]
    if missing or duplicated:
        return Result.fail(
            "Players must be unique across all teams and all drafted players must be assigned.",
            code=error_codes.COVERAGE_MISMATCH,
            details={"missing": missing, "duplicated": duplicated},
        )

    return Result.ok(partition)
