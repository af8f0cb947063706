"""
Feasibility domain service.

Rejects rosters that cannot possibly fill every role slot before any
allocation attempt is made.
"""

from collections.abc import Sequence

from domain.errors import DuplicateParticipant, InsufficientRoleCoverage, InvalidRosterSize
from domain.models.participant import Participant
from domain.models.role import Role
from domain.models.role_demand import RoleDemand


class FeasibilityService:
    """
    Pure domain service for roster prechecks.

    Responsibilities:
    - Verify roster size against the demand
    - Verify participant ids are unique
    - Verify each role has enough qualified participants
    """

    def check_roster_size(self, roster: Sequence[Participant], demand: RoleDemand) -> None:
        """
        Raises:
            InvalidRosterSize: If the roster does not hold exactly the required total
        """
        if len(roster) != demand.total_required:
            raise InvalidRosterSize(demand.total_required, len(roster))

    def check_unique_ids(self, roster: Sequence[Participant]) -> None:
        """
        Raises:
            DuplicateParticipant: On the first repeated participant id
        """
        seen: set[str] = set()
        for participant in roster:
            if participant.id in seen:
                raise DuplicateParticipant(participant.id)
            seen.add(participant.id)

    def qualified_counts(self, roster: Sequence[Participant]) -> dict[Role, int]:
        """
        Count distinct participants qualified for each role.

        A versatile participant counts toward every role it lists.
        """
        qualified: dict[Role, set[str]] = {role: set() for role in Role}
        for participant in roster:
            for role in participant.roles:
                qualified[role].add(participant.id)
        return {role: len(ids) for role, ids in qualified.items()}

    def check_role_coverage(self, roster: Sequence[Participant], demand: RoleDemand) -> dict[Role, int]:
        """
        Check every role in canonical order against its total demand.

        Returns:
            Qualified counts per role

        Raises:
            InsufficientRoleCoverage: For the first role short of qualified participants
        """
        counts = self.qualified_counts(roster)
        for role in Role:
            required = demand.total_for(role)
            if counts[role] < required:
                raise InsufficientRoleCoverage(role, required, counts[role])
        return counts

    def precheck(self, roster: Sequence[Participant], demand: RoleDemand) -> dict[Role, int]:
        """Run size, identity and coverage checks in that order."""
        self.check_roster_size(roster, demand)
        self.check_unique_ids(roster)
        return self.check_role_coverage(roster, demand)
