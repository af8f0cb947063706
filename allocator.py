"""
Balanced team allocation.

Pipeline: precheck -> best-of-N greedy attempts -> swap refinement ->
presentation shuffle. All randomness comes from one seedable Randomizer, so
``allocate(roster, config, seed=...)`` is reproducible.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from config import ALLOCATION_SETTINGS, GROUP_NAMES, NUM_GROUPS, ROLE_SLOTS_PER_GROUP
from domain.errors import NoFeasiblePartitionFound
from domain.models.group import Group
from domain.models.participant import Participant
from domain.models.partition import Partition
from domain.models.role import Role
from domain.models.role_demand import RoleDemand
from domain.services.balance_scoring_service import BalanceScoringService
from domain.services.feasibility_service import FeasibilityService
from domain.services.greedy_allocation_service import GreedyAllocationService
from domain.services.swap_refinement_service import SwapRecord, SwapRefinementService
from utils.debug_logging import debug_log, round_run_id
from utils.randomizer import Randomizer

logger = logging.getLogger("balanced_squads.allocator")


@dataclass(frozen=True)
class AllocationConfig:
    """Team structure and search budgets for one generation round."""

    role_demand: RoleDemand
    group_names: tuple[str, ...]
    max_attempts: int = 50
    refinement_iterations: int = 300
    rating_jitter: float = 0.005

    def __post_init__(self):
        object.__setattr__(self, "group_names", tuple(self.group_names))
        if len(self.group_names) != self.role_demand.num_groups:
            raise ValueError(
                f"Expected {self.role_demand.num_groups} group names, got {len(self.group_names)}"
            )
        if len(set(self.group_names)) != len(self.group_names):
            raise ValueError(f"Group names must be unique: {list(self.group_names)}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.refinement_iterations < 0:
            raise ValueError(
                f"refinement_iterations must be non-negative, got {self.refinement_iterations}"
            )
        if self.rating_jitter < 0:
            raise ValueError(f"rating_jitter must be non-negative, got {self.rating_jitter}")

    @classmethod
    def from_settings(cls, **overrides) -> "AllocationConfig":
        """
        Build the configured default, optionally overriding individual fields.

        Group names from settings are truncated or padded ("Team N") to NUM_GROUPS.
        """
        names = list(GROUP_NAMES[:NUM_GROUPS])
        while len(names) < NUM_GROUPS:
            names.append(f"Team {len(names) + 1}")
        values = {
            "role_demand": RoleDemand.from_settings(ROLE_SLOTS_PER_GROUP, NUM_GROUPS),
            "group_names": tuple(names),
            "max_attempts": ALLOCATION_SETTINGS["max_attempts"],
            "refinement_iterations": ALLOCATION_SETTINGS["refinement_iterations"],
            "rating_jitter": ALLOCATION_SETTINGS["rating_jitter"],
        }
        values.update(overrides)
        return cls(**values)

    @property
    def required_participants(self) -> int:
        return self.role_demand.total_required


@dataclass
class SearchResult:
    """Best candidate from the multi-attempt search."""

    partition: Partition
    score: float
    attempts: int
    feasible_attempts: int


@dataclass
class AllocationOutcome:
    """Accepted result of a generation round."""

    partition: Partition
    score: float
    search_score: float
    attempts: int
    feasible_attempts: int
    accepted_swaps: list[SwapRecord] = field(default_factory=list)

    @property
    def groups(self) -> list[Group]:
        return self.partition.to_groups()

    def summary(self) -> str:
        return f"Team proposals generated! (Balance Score: {self.score:.0f})"


class TeamAllocator:
    """
    Implements the balanced team generation round.

    Splits a roster into equal groups whose role slots are all filled by
    qualified participants, minimizing the spread of group rating totals.
    """

    def __init__(
        self,
        config: AllocationConfig | None = None,
        feasibility: FeasibilityService | None = None,
        scorer: BalanceScoringService | None = None,
    ):
        """
        Initialize the allocator.

        Args:
            config: Structure and budgets (default AllocationConfig.from_settings())
            feasibility: Roster precheck service
            scorer: Balance scorer shared by search and refinement
        """
        self.config = config or AllocationConfig.from_settings()
        self.feasibility = feasibility or FeasibilityService()
        self.scorer = scorer or BalanceScoringService()
        self.greedy = GreedyAllocationService(rating_jitter=self.config.rating_jitter)
        self.refiner = SwapRefinementService(
            max_iterations=self.config.refinement_iterations, scorer=self.scorer
        )

    def search(
        self,
        roster: Sequence[Participant],
        qualified_counts: dict[Role, int],
        randomizer: Randomizer,
        run_id: str = "unseeded",
    ) -> SearchResult:
        """
        Run the greedy allocator up to the attempt budget and keep the best.

        Each attempt uses an independent shuffle of the roster. The first
        feasible partition is always kept, later ones only on strict improvement.

        Raises:
            NoFeasiblePartitionFound: If no attempt filled every slot
        """
        best: Partition | None = None
        best_score = float("inf")
        feasible = 0
        indices = range(len(roster))

        for attempt in range(self.config.max_attempts):
            order = randomizer.shuffled(indices)
            candidate = self.greedy.allocate(
                roster,
                order,
                self.config.role_demand,
                self.config.group_names,
                qualified_counts,
                randomizer,
            )
            if candidate is None:
                continue
            feasible += 1
            score = self.scorer.score(candidate)
            if best is None or self.scorer.is_better(score, best_score):
                best = candidate
                best_score = score
                debug_log(
                    "allocator.py:search",
                    "new best attempt",
                    {"attempt": attempt, "score": score, "totals": list(candidate.totals)},
                    run_id=run_id,
                )

        if best is None:
            logger.warning(f"No feasible partition after {self.config.max_attempts} attempts")
            raise NoFeasiblePartitionFound(self.config.max_attempts)

        logger.debug(
            f"Search kept score {best_score:.0f} "
            f"({feasible}/{self.config.max_attempts} attempts feasible)"
        )
        return SearchResult(best, best_score, self.config.max_attempts, feasible)

    def presentation_shuffle(self, partition: Partition, randomizer: Randomizer) -> Partition:
        """Randomly reorder each group's slots in place; bindings and totals are unchanged."""
        for group_index in range(partition.num_groups):
            order = randomizer.shuffled(range(len(partition.members[group_index])))
            partition.reorder_group(group_index, order)
        return partition

    def allocate(self, roster: Sequence[Participant], seed: int | None = None) -> AllocationOutcome:
        """
        Generate balanced groups for a roster.

        Args:
            roster: Exactly ``config.required_participants`` participants
            seed: Optional seed for a reproducible round

        Returns:
            AllocationOutcome with the refined, display-ordered partition

        Raises:
            InvalidRosterSize, DuplicateParticipant, InsufficientRoleCoverage,
            NoFeasiblePartitionFound
        """
        roster = tuple(roster)
        qualified_counts = self.feasibility.precheck(roster, self.config.role_demand)
        randomizer = Randomizer(seed)
        run_id = round_run_id(seed)

        found = self.search(roster, qualified_counts, randomizer, run_id=run_id)
        refined = self.refiner.refine(found.partition, randomizer)
        for swap in refined.accepted_swaps:
            debug_log("allocator.py:refine", "accepted swap", vars(swap), run_id=run_id)
        partition = self.presentation_shuffle(refined.partition, randomizer)

        logger.info(
            f"Generated {partition.num_groups} groups from {len(roster)} participants: "
            f"score {found.score:.0f} -> {refined.final_score:.0f} "
            f"({len(refined.accepted_swaps)} swaps, "
            f"{found.feasible_attempts}/{found.attempts} attempts feasible)"
        )
        for group in partition.to_groups():
            logger.debug(f"  {group} [total {group.total_rating}]")

        return AllocationOutcome(
            partition=partition,
            score=refined.final_score,
            search_score=found.score,
            attempts=found.attempts,
            feasible_attempts=found.feasible_attempts,
            accepted_swaps=refined.accepted_swaps,
        )


def allocate(
    roster: Sequence[Participant],
    config: AllocationConfig | None = None,
    seed: int | None = None,
) -> AllocationOutcome:
    """Convenience wrapper: ``TeamAllocator(config).allocate(roster, seed)``."""
    return TeamAllocator(config).allocate(roster, seed=seed)
