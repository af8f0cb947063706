"""
Swap refinement domain service.

Hill-climbs a feasible partition by exchanging same-role participants between
two groups. A swap only moves group membership, so role coverage can never be
broken by refinement.
"""

import logging
from dataclasses import dataclass, field

from domain.models.partition import Partition
from domain.models.role import Role
from domain.services.balance_scoring_service import BalanceScoringService
from utils.randomizer import Randomizer

logger = logging.getLogger("balanced_squads.domain.swap_refinement")


@dataclass(frozen=True)
class SwapRecord:
    """An accepted swap between two groups."""

    iteration: int
    role: Role
    group_a: str
    participant_a: str  # id of the participant that left group_a
    group_b: str
    participant_b: str  # id of the participant that left group_b
    score_before: float
    score_after: float


@dataclass
class RefinementResult:
    """Outcome of a refinement run."""

    partition: Partition
    initial_score: float
    final_score: float
    iterations: int = 0
    accepted_swaps: list[SwapRecord] = field(default_factory=list)


class SwapRefinementService:
    """
    Pure domain service for local-search refinement.

    Only strictly improving swaps are kept; there is no acceptance of worse
    candidates and no backtracking once a swap is kept.
    """

    def __init__(self, max_iterations: int = 300, scorer: BalanceScoringService | None = None):
        """
        Args:
            max_iterations: Hard cap on swap trials
            scorer: Balance scorer (default BalanceScoringService())
        """
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")
        self.max_iterations = max_iterations
        self.scorer = scorer or BalanceScoringService()

    def refine(self, partition: Partition, randomizer: Randomizer) -> RefinementResult:
        """
        Improve balance of a copy of ``partition``; the input is never mutated.

        Args:
            partition: Feasible partition to start from
            randomizer: Source of group, role and slot picks

        Returns:
            RefinementResult with the best partition found
        """
        current = partition.copy()
        current_score = self.scorer.score(current)
        result = RefinementResult(current, current_score, current_score)

        if current.num_groups < 2:
            return result

        roles = list(Role)
        for iteration in range(self.max_iterations):
            if current_score == 0:
                logger.debug(f"Early termination: perfect balance after {iteration} iterations")
                break
            result.iterations = iteration + 1

            group_a, group_b = randomizer.distinct_pair(current.num_groups)
            role = randomizer.choice(roles)
            slots_a = current.slots_with_role(group_a, role)
            slots_b = current.slots_with_role(group_b, role)
            if not slots_a or not slots_b:
                continue

            slot_a = randomizer.choice(slots_a)
            slot_b = randomizer.choice(slots_b)
            leaving_a = current.members[group_a][slot_a]
            leaving_b = current.members[group_b][slot_b]

            current.swap(group_a, slot_a, group_b, slot_b)
            candidate_score = self.scorer.score(current)

            if self.scorer.is_better(candidate_score, current_score):
                record = SwapRecord(
                    iteration=iteration,
                    role=role,
                    group_a=current.group_names[group_a],
                    participant_a=current.roster[leaving_a].id,
                    group_b=current.group_names[group_b],
                    participant_b=current.roster[leaving_b].id,
                    score_before=current_score,
                    score_after=candidate_score,
                )
                result.accepted_swaps.append(record)
                logger.debug(
                    f"Swap accepted ({role.value}): {record.participant_a} "
                    f"{record.group_a}->{record.group_b}, {record.participant_b} "
                    f"{record.group_b}->{record.group_a}, score {current_score:.0f} -> {candidate_score:.0f}"
                )
                current_score = candidate_score
            else:
                current.swap(group_a, slot_a, group_b, slot_b)

        result.final_score = current_score
        return result
