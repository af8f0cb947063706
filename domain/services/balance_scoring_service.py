"""
Balance scoring domain service.
"""

from collections.abc import Sequence

from domain.models.partition import Partition


def balance_score_from_totals(totals: Sequence[float]) -> float:
    """
    Max minus min group total; lower is better, 0 is perfect balance.

    Fewer than two groups has no meaningful balance and scores infinity.
    """
    if len(totals) < 2:
        return float("inf")
    return float(max(totals) - min(totals))


class BalanceScoringService:
    """
    Pure domain service for partition balance.

    Used both to rank allocation attempts and to accept refinement swaps.
    """

    def score(self, partition: Partition | None) -> float:
        if partition is None:
            return float("inf")
        return balance_score_from_totals(partition.totals)

    def is_better(self, candidate: float, incumbent: float) -> bool:
        """Strict improvement only; equal scores never replace the incumbent."""
        return candidate < incumbent
