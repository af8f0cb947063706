"""
Partition domain model.

Participants are addressed by their stable position in the roster. Each group
keeps two parallel slot arrays (member index, slot role) and a running rating
total, so a trial swap is an O(1) slot exchange and undo is a second swap.
"""

from collections.abc import Sequence

from domain.models.group import Assignment, Group
from domain.models.participant import Participant
from domain.models.role import Role


class Partition:
    """
    Division of a roster into named groups with per-slot role bindings.

    This is a pure domain model with no infrastructure dependencies.
    """

    def __init__(self, roster: Sequence[Participant], group_names: Sequence[str]):
        """
        Create an empty partition.

        Args:
            roster: Participants addressed by index (the arena)
            group_names: Ordered group names
        """
        if not group_names:
            raise ValueError("Partition needs at least one group")
        self.roster: tuple[Participant, ...] = tuple(roster)
        self.group_names: tuple[str, ...] = tuple(group_names)
        self.members: list[list[int]] = [[] for _ in self.group_names]
        self.slot_roles: list[list[Role]] = [[] for _ in self.group_names]
        self.totals: list[int] = [0 for _ in self.group_names]

    @property
    def num_groups(self) -> int:
        return len(self.group_names)

    def assign(self, group_index: int, participant_index: int, role: Role) -> None:
        """Append a (participant, role) slot to a group."""
        self.members[group_index].append(participant_index)
        self.slot_roles[group_index].append(role)
        self.totals[group_index] += self.roster[participant_index].rating

    def slots_with_role(self, group_index: int, role: Role) -> list[int]:
        """Slot positions in a group currently bound to ``role``."""
        return [slot for slot, r in enumerate(self.slot_roles[group_index]) if r == role]

    def swap(self, group_a: int, slot_a: int, group_b: int, slot_b: int) -> None:
        """
        Exchange the members of two same-role slots.

        Roles stay with the slots, so only group membership changes. Calling
        swap again with the same arguments undoes it.

        Raises:
            ValueError: If the two slots hold different roles
        """
        role_a = self.slot_roles[group_a][slot_a]
        role_b = self.slot_roles[group_b][slot_b]
        if role_a != role_b:
            raise ValueError(f"Cannot swap {role_a} slot with {role_b} slot")

        member_a = self.members[group_a][slot_a]
        member_b = self.members[group_b][slot_b]
        self.members[group_a][slot_a] = member_b
        self.members[group_b][slot_b] = member_a

        delta = self.roster[member_b].rating - self.roster[member_a].rating
        self.totals[group_a] += delta
        self.totals[group_b] -= delta

    def reorder_group(self, group_index: int, order: Sequence[int]) -> None:
        """Permute a group's slots; ``order`` lists old slot positions."""
        if sorted(order) != list(range(len(self.members[group_index]))):
            raise ValueError(f"Invalid slot order for group {self.group_names[group_index]}")
        self.members[group_index] = [self.members[group_index][i] for i in order]
        self.slot_roles[group_index] = [self.slot_roles[group_index][i] for i in order]

    def assigned_count(self) -> int:
        return sum(len(m) for m in self.members)

    def copy(self) -> "Partition":
        """Copy the index arrays; participants are shared."""
        clone = Partition.__new__(Partition)
        clone.roster = self.roster
        clone.group_names = self.group_names
        clone.members = [list(m) for m in self.members]
        clone.slot_roles = [list(r) for r in self.slot_roles]
        clone.totals = list(self.totals)
        return clone

    def to_groups(self) -> list[Group]:
        """Materialize the read-only Group view for callers."""
        groups = []
        for name, members, roles in zip(self.group_names, self.members, self.slot_roles):
            assignments = tuple(
                Assignment(self.roster[index], name, role) for index, role in zip(members, roles)
            )
            groups.append(Group(name, assignments))
        return groups

    def signature(self) -> tuple[tuple[tuple[str, str], ...], ...]:
        """Hashable (participant id, role) layout per group, slot order included."""
        return tuple(
            tuple((self.roster[index].id, role.value) for index, role in zip(members, roles))
            for members, roles in zip(self.members, self.slot_roles)
        )

    def __str__(self) -> str:
        return "\n".join(str(group) for group in self.to_groups())
