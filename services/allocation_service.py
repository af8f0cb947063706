"""
Allocation application service.

Runs a team generation round and reports failures as Result values with
stable error codes and structured details.
"""

import logging
from collections.abc import Sequence

from allocator import AllocationConfig, AllocationOutcome, TeamAllocator
from domain.errors import (
    AllocationError,
    DuplicateParticipant,
    InsufficientRoleCoverage,
    InvalidRosterSize,
    NoFeasiblePartitionFound,
)
from domain.models.participant import Participant
from services import error_codes
from services.partition_validation import validate_partition
from services.result import Result

logger = logging.getLogger("balanced_squads.services.allocation")


class AllocationService:
    """Entry point collaborators use to turn a drafted roster into groups."""

    def __init__(self, config: AllocationConfig | None = None, allocator: TeamAllocator | None = None):
        """
        Args:
            config: Structure and budgets (ignored when ``allocator`` is given)
            allocator: Pre-built allocator, mainly for tests
        """
        self.allocator = allocator or TeamAllocator(config)

    @property
    def config(self) -> AllocationConfig:
        return self.allocator.config

    def generate(self, roster: Sequence[Participant], seed: int | None = None) -> Result[AllocationOutcome]:
        """
        Generate balanced groups.

        Args:
            roster: Drafted participants
            seed: Optional seed for a reproducible round

        Returns:
            Result.ok(AllocationOutcome) on success
            Result.fail(message, code, details) on any allocation error
        """
        try:
            outcome = self.allocator.allocate(roster, seed=seed)
        except AllocationError as exc:
            logger.info(f"Team generation rejected: {exc}")
            return self._failure(exc)

        # The engine guarantees these invariants; a failure here is a bug, not user error.
        check = validate_partition(outcome.partition, self.config.role_demand)
        if not check.success:
            raise RuntimeError(f"Allocator produced an invalid partition: {check.error}")

        return Result.ok(outcome)

    def _failure(self, exc: AllocationError) -> Result[AllocationOutcome]:
        if isinstance(exc, InvalidRosterSize):
            return Result.fail(
                str(exc),
                code=error_codes.INVALID_ROSTER_SIZE,
                details={"expected": exc.expected, "actual": exc.actual},
            )
        if isinstance(exc, DuplicateParticipant):
            return Result.fail(
                str(exc),
                code=error_codes.DUPLICATE_PARTICIPANT,
                details={"participant_id": exc.participant_id},
            )
        if isinstance(exc, InsufficientRoleCoverage):
            return Result.fail(
                str(exc),
                code=error_codes.INSUFFICIENT_ROLE_COVERAGE,
                details={
                    "role": exc.role.value,
                    "required": exc.required,
                    "available": exc.available,
                },
            )
        if isinstance(exc, NoFeasiblePartitionFound):
            return Result.fail(
                str(exc),
                code=error_codes.NO_FEASIBLE_PARTITION,
                details={"attempts": exc.attempts},
            )
        return Result.fail(str(exc), code=error_codes.VALIDATION_ERROR)
