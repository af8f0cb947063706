"""
Domain models - pure data structures representing team generation entities.
"""

from domain.models.group import Assignment, Group
from domain.models.participant import Participant
from domain.models.partition import Partition
from domain.models.role import Role
from domain.models.role_demand import RoleDemand

__all__ = ["Assignment", "Group", "Participant", "Partition", "Role", "RoleDemand"]
