"""
Participant domain model.
"""

from dataclasses import dataclass

from domain.models.role import Role

# Inclusive skill scale
RATING_MIN = 1
RATING_MAX = 5


@dataclass(frozen=True)
class Participant:
    """
    A rated person eligible for team generation.

    This is a pure domain model with no infrastructure dependencies. The
    engine never mutates participants; versatility comes from the size of
    the role set.
    """

    id: str
    name: str
    rating: int
    roles: frozenset[Role]

    def __post_init__(self):
        if not self.id:
            raise ValueError("Participant id must be non-empty")
        if not isinstance(self.rating, int) or isinstance(self.rating, bool):
            raise ValueError(f"Rating for {self.name} must be an integer, got {self.rating!r}")
        if not RATING_MIN <= self.rating <= RATING_MAX:
            raise ValueError(
                f"Rating for {self.name} must be between {RATING_MIN} and {RATING_MAX}, "
                f"got {self.rating}"
            )
        roles = frozenset(Role.parse(r) for r in self.roles)
        if not roles:
            raise ValueError(f"Participant {self.name} must qualify for at least one role")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "roles", roles)

    @property
    def versatility(self) -> int:
        """Number of distinct roles this participant qualifies for."""
        return len(self.roles)

    def can_play(self, role: Role) -> bool:
        """Check whether the participant qualifies for a role."""
        return role in self.roles

    def __str__(self) -> str:
        roles = "/".join(r.value for r in Role if r in self.roles)
        return f"{self.name} ({self.rating}, {roles})"
