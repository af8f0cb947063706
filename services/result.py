"""
Result type for consistent error handling across services.

Services return success/failure states instead of raising, so callers (the CLI,
a web handler, a bot command) can render an actionable message from the error
code and details without catching domain exceptions.

Usage:
    return Result.ok(outcome)
    return Result.fail("Need 18 players", code=INVALID_ROSTER_SIZE, details={"expected": 18})

    if result.success:
        print(result.value)
    else:
        print(f"Error ({result.error_code}): {result.error}")
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    A simple result type for service method return values.

    Attributes:
        success: Whether the operation succeeded
        value: The return value if successful (None if failed or void operation)
        error: Error message if failed (None if successful)
        error_code: Optional error code for programmatic error handling
        details: Structured failure data (counts, ids) for building messages
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        """Create a successful result with an optional value."""
        return cls(success=True, value=value)

    @classmethod
    def fail(
        cls, error: str, code: str | None = None, details: dict[str, Any] | None = None
    ) -> "Result[T]":
        """Create a failed result with an error message, optional code and details."""
        return cls(success=False, error=error, error_code=code, details=dict(details or {}))

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success

    def unwrap(self) -> T:
        """
        Get the value, raising ValueError if the result is a failure.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        """Get the value or a default if the result is a failure."""
        return self.value if self.success else default  # type: ignore

    def map(self, fn: Callable[[T], "Result"]) -> "Result":
        """
        Chain operations on successful results.

        If this result is successful, applies fn to the value and returns its result.
        If this result is a failure, returns this failure unchanged.
        """
        if not self.success:
            return self
        return fn(self.value)  # type: ignore
