"""
Application services layer.

Services orchestrate team generation using domain services and report
outcomes through the Result type.
"""

from services.allocation_service import AllocationService
from services.partition_validation import validate_partition

# Result type for consistent error handling
from services.result import Result
from services.roster_service import (
    load_participants,
    participant_from_record,
    sample_participants,
    select_draft,
)

__all__ = [
    "AllocationService",
    "Result",
    "load_participants",
    "participant_from_record",
    "sample_participants",
    "select_draft",
    "validate_partition",
]
