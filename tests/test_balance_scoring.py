"""Tests for balance scoring."""

import math

from domain.models.partition import Partition
from domain.services.balance_scoring_service import BalanceScoringService, balance_score_from_totals
from tests.conftest import DF, make_participant


class TestBalanceScoreFromTotals:
    def test_spread(self):
        assert balance_score_from_totals([19, 18, 17]) == 2

    def test_perfect_balance_is_zero(self):
        assert balance_score_from_totals([18, 18, 18]) == 0

    def test_single_group_is_infinite(self):
        assert math.isinf(balance_score_from_totals([42]))

    def test_empty_is_infinite(self):
        assert math.isinf(balance_score_from_totals([]))

    def test_order_does_not_matter(self):
        assert balance_score_from_totals([3, 10, 7]) == balance_score_from_totals([10, 7, 3])


class TestBalanceScoringService:
    def test_scores_partition_totals(self):
        roster = [make_participant("a", 5, DF), make_participant("b", 2, DF)]
        partition = Partition(roster, ["Blues", "Whites"])
        partition.assign(0, 0, DF)
        partition.assign(1, 1, DF)
        assert BalanceScoringService().score(partition) == 3

    def test_none_scores_infinite(self):
        assert math.isinf(BalanceScoringService().score(None))

    def test_is_better_is_strict(self):
        scorer = BalanceScoringService()
        assert scorer.is_better(1, 2)
        assert not scorer.is_better(2, 2)
        assert not scorer.is_better(float("inf"), float("inf"))
