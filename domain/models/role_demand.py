"""
Role demand domain model.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from domain.models.role import Role


@dataclass(frozen=True)
class RoleDemand:
    """
    Required slot counts per role, per group and across all groups.

    Roles missing from ``per_group`` demand zero slots.
    """

    per_group: Mapping[Role, int] = field(default_factory=dict)
    num_groups: int = 1

    def __post_init__(self):
        if self.num_groups < 1:
            raise ValueError(f"Need at least one group, got {self.num_groups}")
        normalized: dict[Role, int] = {}
        for role, count in self.per_group.items():
            role = Role.parse(role)
            if count < 0:
                raise ValueError(f"Slot count for {role} must be non-negative, got {count}")
            normalized[role] = int(count)
        object.__setattr__(self, "per_group", MappingProxyType(normalized))

    @classmethod
    def from_settings(cls, slots_per_group: Mapping[str, int], num_groups: int) -> "RoleDemand":
        """Build a demand from config-style ``{"Defender": 3, ...}`` mappings."""
        return cls({Role.parse(name): count for name, count in slots_per_group.items()}, num_groups)

    def slots_for(self, role: Role) -> int:
        """Slots one group needs for ``role``."""
        return self.per_group.get(role, 0)

    def total_for(self, role: Role) -> int:
        """Slots needed for ``role`` across all groups."""
        return self.slots_for(role) * self.num_groups

    @property
    def group_size(self) -> int:
        return sum(self.per_group.values())

    @property
    def total_required(self) -> int:
        return self.group_size * self.num_groups

    def __str__(self) -> str:
        shape = ", ".join(f"{role.value}={self.slots_for(role)}" for role in Role)
        return f"{self.num_groups} groups x ({shape})"
