"""
Tests for the team generation domain models.
"""

import pytest

from domain.models.group import Assignment, Group
from domain.models.participant import Participant
from domain.models.partition import Partition
from domain.models.role import Role
from domain.models.role_demand import RoleDemand
from tests.conftest import DF, FW, MID, make_participant


class TestRole:
    """Tests for Role parsing."""

    def test_parse_by_value(self):
        assert Role.parse("Defender") is Role.DEFENDER

    def test_parse_by_name_case_insensitive(self):
        assert Role.parse("forward") is Role.FORWARD
        assert Role.parse(" MIDFIELDER ") is Role.MIDFIELDER

    def test_parse_role_passthrough(self):
        assert Role.parse(Role.MIDFIELDER) is Role.MIDFIELDER

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown role"):
            Role.parse("Goalkeeper")

    def test_canonical_order(self):
        assert list(Role) == [Role.DEFENDER, Role.MIDFIELDER, Role.FORWARD]


class TestParticipant:
    """Tests for Participant validation."""

    def test_versatility_counts_distinct_roles(self):
        p = make_participant("a", 3, DF, MID, DF)
        assert p.versatility == 2

    def test_can_play(self):
        p = make_participant("a", 3, MID, FW)
        assert p.can_play(FW)
        assert not p.can_play(DF)

    def test_roles_given_as_strings_are_normalized(self):
        p = Participant(id="a", name="A", rating=2, roles=frozenset({"Defender"}))
        assert p.roles == frozenset({DF})

    def test_empty_roles_rejected(self):
        with pytest.raises(ValueError, match="at least one role"):
            Participant(id="a", name="A", rating=3, roles=frozenset())

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range_rejected(self, rating):
        with pytest.raises(ValueError, match="Rating"):
            make_participant("a", rating, DF)

    @pytest.mark.parametrize("rating", [3.5, 3.0, True, "3"])
    def test_non_integer_rating_rejected(self, rating):
        with pytest.raises(ValueError, match="must be an integer"):
            make_participant("a", rating, DF)

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError, match="id"):
            Participant(id="", name="A", rating=3, roles=frozenset({DF}))

    def test_is_immutable(self):
        p = make_participant("a", 3, DF)
        with pytest.raises(AttributeError):
            p.rating = 5  # type: ignore[misc]


class TestRoleDemand:
    """Tests for RoleDemand derived values."""

    def test_totals(self):
        demand = RoleDemand({DF: 3, MID: 2, FW: 1}, num_groups=3)
        assert demand.group_size == 6
        assert demand.total_required == 18
        assert demand.total_for(DF) == 9
        assert demand.total_for(MID) == 6
        assert demand.total_for(FW) == 3

    def test_missing_role_demands_zero(self):
        demand = RoleDemand({DF: 2}, num_groups=2)
        assert demand.slots_for(FW) == 0
        assert demand.total_for(FW) == 0

    def test_from_settings_uses_role_values(self):
        demand = RoleDemand.from_settings({"Defender": 1, "Forward": 2}, num_groups=4)
        assert demand.slots_for(DF) == 1
        assert demand.slots_for(FW) == 2
        assert demand.total_required == 12

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            RoleDemand({DF: -1}, num_groups=2)

    def test_zero_groups_rejected(self):
        with pytest.raises(ValueError, match="at least one group"):
            RoleDemand({DF: 1}, num_groups=0)


class TestGroup:
    """Tests for Group statistics and formation view."""

    def _group(self):
        a = make_participant("a", 5, DF, name="Zed")
        b = make_participant("b", 2, DF, name="Amy")
        c = make_participant("c", 4, FW, name="Bo")
        return Group(
            "Blues",
            (Assignment(a, "Blues", DF), Assignment(b, "Blues", DF), Assignment(c, "Blues", FW)),
        )

    def test_total_and_average(self):
        group = self._group()
        assert group.total_rating == 11
        assert group.average_rating == pytest.approx(11 / 3)

    def test_empty_group_average_is_none(self):
        assert Group("Empty").average_rating is None
        assert Group("Empty").total_rating == 0

    def test_role_counts_include_unused_roles(self):
        assert self._group().role_counts() == {DF: 2, MID: 0, FW: 1}

    def test_members_by_role_sorted_by_name(self):
        formation = self._group().members_by_role()
        assert [p.name for p in formation[DF]] == ["Amy", "Zed"]
        assert formation[MID] == []
        assert [p.name for p in formation[FW]] == ["Bo"]

    def test_assignment_qualification(self):
        p = make_participant("a", 3, MID)
        assert Assignment(p, "Blues", MID).is_qualified
        assert not Assignment(p, "Blues", FW).is_qualified


class TestPartition:
    """Tests for the index-arena Partition."""

    def _partition(self):
        roster = [
            make_participant("a", 5, DF),
            make_participant("b", 1, DF),
            make_participant("c", 3, FW),
            make_participant("d", 2, FW),
        ]
        partition = Partition(roster, ["Blues", "Whites"])
        partition.assign(0, 0, DF)
        partition.assign(0, 2, FW)
        partition.assign(1, 1, DF)
        partition.assign(1, 3, FW)
        return partition

    def test_totals_track_assignments(self):
        partition = self._partition()
        assert partition.totals == [8, 3]
        assert partition.assigned_count() == 4

    def test_swap_exchanges_members_and_totals(self):
        partition = self._partition()
        partition.swap(0, 0, 1, 0)
        assert partition.members == [[1, 2], [0, 3]]
        assert partition.slot_roles == [[DF, FW], [DF, FW]]
        assert partition.totals == [4, 7]

    def test_swap_twice_undoes(self):
        partition = self._partition()
        before = partition.signature()
        partition.swap(0, 1, 1, 1)
        partition.swap(0, 1, 1, 1)
        assert partition.signature() == before
        assert partition.totals == [8, 3]

    def test_swap_different_roles_rejected(self):
        partition = self._partition()
        with pytest.raises(ValueError, match="Cannot swap"):
            partition.swap(0, 0, 1, 1)

    def test_copy_is_independent(self):
        partition = self._partition()
        clone = partition.copy()
        clone.swap(0, 0, 1, 0)
        assert partition.members == [[0, 2], [1, 3]]
        assert partition.totals == [8, 3]
        assert clone.roster is partition.roster

    def test_reorder_group_keeps_bindings(self):
        partition = self._partition()
        partition.reorder_group(0, [1, 0])
        assert partition.members[0] == [2, 0]
        assert partition.slot_roles[0] == [FW, DF]
        assert partition.totals[0] == 8

    def test_reorder_group_rejects_bad_order(self):
        partition = self._partition()
        with pytest.raises(ValueError, match="Invalid slot order"):
            partition.reorder_group(0, [0, 0])

    def test_slots_with_role(self):
        partition = self._partition()
        assert partition.slots_with_role(0, FW) == [1]
        assert partition.slots_with_role(1, MID) == []

    def test_to_groups(self):
        groups = self._partition().to_groups()
        assert [g.name for g in groups] == ["Blues", "Whites"]
        assert [a.participant.id for a in groups[0].assignments] == ["a", "c"]
        assert groups[1].assignments[1].role is FW
        assert groups[1].assignments[1].group_name == "Whites"

    def test_requires_a_group(self):
        with pytest.raises(ValueError):
            Partition([], [])
