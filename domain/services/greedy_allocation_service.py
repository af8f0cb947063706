"""
Greedy allocation domain service.

Builds one candidate partition per attempt: scarce roles are filled first,
and within a role the least versatile (then highest rated) participants are
placed first. There is no backtracking; a starved slot fails the attempt and
the caller simply tries again with a different shuffle.
"""

import logging
from collections.abc import Mapping, Sequence

from domain.models.participant import Participant
from domain.models.partition import Partition
from domain.models.role import Role
from domain.models.role_demand import RoleDemand
from utils.randomizer import Randomizer

logger = logging.getLogger("balanced_squads.domain.greedy_allocation")


class GreedyAllocationService:
    """
    Pure domain service for single-attempt allocation.

    Responsibilities:
    - Order roles by scarcity
    - Order each role's candidate pool by assignment priority
    - Fill slots slot-major, group-minor
    """

    def __init__(self, rating_jitter: float = 0.005):
        """
        Args:
            rating_jitter: Max magnitude of noise added to ratings when ordering
                           pools; breaks equal-rating ties differently per attempt.
                           0 keeps ties in shuffled order.
        """
        if rating_jitter < 0:
            raise ValueError(f"rating_jitter must be non-negative, got {rating_jitter}")
        self.rating_jitter = rating_jitter

    def role_fill_order(self, qualified_counts: Mapping[Role, int], demand: RoleDemand) -> list[Role]:
        """
        Sort roles by scarcity (qualified / required slots), scarcest first.

        Roles with zero demand divide by 1. Ties keep canonical role order.
        """

        def scarcity(role: Role) -> float:
            return qualified_counts.get(role, 0) / (demand.total_for(role) or 1)

        return sorted(Role, key=scarcity)

    def assignment_priority(self, participant: Participant, jitter: float = 0.0) -> tuple[int, float]:
        """
        Sort key for a candidate pool (ascending).

        Fewer roles first since they have fewer placement options later;
        then higher ``rating + jitter`` first.
        """
        return (participant.versatility, -(participant.rating + jitter))

    def build_pool(
        self,
        roster: Sequence[Participant],
        order: Sequence[int],
        role: Role,
        randomizer: Randomizer,
    ) -> list[int]:
        """Qualified roster indices for ``role``, in assignment priority order."""
        qualified = [index for index in order if roster[index].can_play(role)]
        keys = {
            index: self.assignment_priority(roster[index], randomizer.jitter(self.rating_jitter))
            for index in qualified
        }
        return sorted(qualified, key=keys.__getitem__)

    def allocate(
        self,
        roster: Sequence[Participant],
        order: Sequence[int],
        demand: RoleDemand,
        group_names: Sequence[str],
        qualified_counts: Mapping[Role, int],
        randomizer: Randomizer,
    ) -> Partition | None:
        """
        Build one candidate partition.

        Args:
            roster: Participants (arena)
            order: Shuffled roster indices for this attempt
            demand: Slots per role per group
            group_names: Ordered group names
            qualified_counts: Qualified participants per role (from the precheck)
            randomizer: Source of rating jitter

        Returns:
            A complete partition, or None if some slot could not be filled
        """
        partition = Partition(roster, group_names)
        assigned: set[int] = set()

        for role in self.role_fill_order(qualified_counts, demand):
            slots = demand.slots_for(role)
            if slots == 0:
                continue
            pool = self.build_pool(roster, order, role, randomizer)
            cursor = 0
            for _slot in range(slots):
                for group_index in range(partition.num_groups):
                    while cursor < len(pool) and pool[cursor] in assigned:
                        cursor += 1
                    if cursor >= len(pool):
                        logger.debug(
                            f"Attempt starved: no qualified participant left for "
                            f"{role.value} in {group_names[group_index]}"
                        )
                        return None
                    participant_index = pool[cursor]
                    partition.assign(group_index, participant_index, role)
                    assigned.add(participant_index)
                    cursor += 1

        if len(assigned) != demand.total_required:
            return None
        return partition
