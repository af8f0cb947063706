"""
Group domain model.
"""

from dataclasses import dataclass

from domain.models.participant import Participant
from domain.models.role import Role


@dataclass(frozen=True)
class Assignment:
    """A participant bound to one role in one group."""

    participant: Participant
    group_name: str
    role: Role

    @property
    def is_qualified(self) -> bool:
        return self.participant.can_play(self.role)


@dataclass(frozen=True)
class Group:
    """
    A named group and its ordered assignments.

    This is a read-only view handed to callers; allocation itself works on
    the index arrays of a Partition.
    """

    name: str
    assignments: tuple[Assignment, ...] = ()

    @property
    def participants(self) -> list[Participant]:
        return [a.participant for a in self.assignments]

    @property
    def total_rating(self) -> int:
        """Sum of member ratings."""
        return sum(a.participant.rating for a in self.assignments)

    @property
    def average_rating(self) -> float | None:
        """Mean member rating, or None for an empty group."""
        if not self.assignments:
            return None
        return self.total_rating / len(self.assignments)

    def role_counts(self) -> dict[Role, int]:
        """Count assignments per role (every role present, zero if unused)."""
        counts = dict.fromkeys(Role, 0)
        for assignment in self.assignments:
            counts[assignment.role] += 1
        return counts

    def members_by_role(self) -> dict[Role, list[Participant]]:
        """
        Formation view of the group.

        Returns:
            Mapping of each role (canonical order) to its holders sorted by name
        """
        formation: dict[Role, list[Participant]] = {role: [] for role in Role}
        for assignment in self.assignments:
            formation[assignment.role].append(assignment.participant)
        for members in formation.values():
            members.sort(key=lambda p: p.name)
        return formation

    def __str__(self) -> str:
        members = ", ".join(f"{a.participant.name}({a.role.value})" for a in self.assignments)
        return f"{self.name}: {members}"
