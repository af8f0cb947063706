"""
Allocation error taxonomy.

All errors are raised synchronously before or instead of a result; the engine
never retries beyond its own attempt budget.
"""

from domain.models.role import Role


class AllocationError(Exception):
    """Base class for team generation failures a caller can act on."""


class InvalidRosterSize(AllocationError):
    """Roster size differs from groups x group size."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Please select exactly {expected} players for the draft. Currently {actual} selected."
        )


class DuplicateParticipant(AllocationError):
    """Two roster entries share the same participant id."""

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id!r} appears more than once in the roster.")


class InsufficientRoleCoverage(AllocationError):
    """Fewer qualified participants than slots for a role."""

    def __init__(self, role: Role, required: int, available: int):
        self.role = role
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough unique players capable of playing {role.value}. "
            f"Need {required}, but only {available} available."
        )


class NoFeasiblePartitionFound(AllocationError):
    """Every attempt in the search budget starved some role slot."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate balanced teams after {attempts} attempts. "
            "The selected players might not cover all team position needs adequately."
        )
