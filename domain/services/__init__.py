"""
Domain services containing pure team generation logic.
"""

from domain.services.balance_scoring_service import BalanceScoringService, balance_score_from_totals
from domain.services.feasibility_service import FeasibilityService
from domain.services.greedy_allocation_service import GreedyAllocationService
from domain.services.swap_refinement_service import (
    RefinementResult,
    SwapRecord,
    SwapRefinementService,
)

__all__ = [
    "BalanceScoringService",
    "FeasibilityService",
    "GreedyAllocationService",
    "RefinementResult",
    "SwapRecord",
    "SwapRefinementService",
    "balance_score_from_totals",
]
