"""
Standard error codes for service layer.

These error codes allow callers to programmatically handle specific
allocation failures without parsing error message text.

Usage:
    from services.error_codes import INVALID_ROSTER_SIZE
    from services.result import Result

    if len(roster) != required:
        return Result.fail("Wrong roster size", code=INVALID_ROSTER_SIZE)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Roster errors
INVALID_ROSTER_SIZE = "invalid_roster_size"
DUPLICATE_PARTICIPANT = "duplicate_participant"

# Allocation errors
INSUFFICIENT_ROLE_COVERAGE = "insufficient_role_coverage"
NO_FEASIBLE_PARTITION = "no_feasible_partition"

# Partition validation errors
GROUP_SIZE_MISMATCH = "group_size_mismatch"
ROLE_SHAPE_MISMATCH = "role_shape_mismatch"
UNQUALIFIED_ASSIGNMENT = "unqualified_assignment"
COVERAGE_MISMATCH = "coverage_mismatch"
