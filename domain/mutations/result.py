"""
Result type returned by every mutation.

Recoverable precondition failures (stale index, unknown id, bad
permutation) are reported as a failed MutationResult instead of an
exception. Callers must check ``success`` before using ``value``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ErrorCategory(str, Enum):
    """Error taxonomy bucket a mutation failure belongs to."""

    STRUCTURAL_PRECONDITION = "structural_precondition"
    INVALID_PERMUTATION = "invalid_permutation"


class MutationErrorCode(str, Enum):
    """Reason a mutation was refused."""

    NOT_FOUND = "not_found"
    LAST_WEEK = "last_week"
    INVALID_PERMUTATION = "invalid_permutation"
    SUPERSET_CONFLICT = "superset_conflict"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class MutationError:
    """A refused mutation: machine-readable code plus a user-facing message."""

    code: MutationErrorCode
    message: str

    @property
    def category(self) -> ErrorCategory:
        if self.code == MutationErrorCode.INVALID_PERMUTATION:
            return ErrorCategory.INVALID_PERMUTATION
        return ErrorCategory.STRUCTURAL_PRECONDITION

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True)
class MutationResult(Generic[T]):
    """
    Outcome of a mutation.

    Examples:
        >>> MutationResult.ok(3).value
        3
        >>> failed = MutationResult.fail(MutationErrorCode.NOT_FOUND, "No week at index 4")
        >>> failed.success, failed.value
        (False, None)
    """

    success: bool
    value: Optional[T] = None
    error: Optional[MutationError] = None

    @classmethod
    def ok(cls, value: T) -> "MutationResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, code: MutationErrorCode, message: str) -> "MutationResult[T]":
        return cls(success=False, error=MutationError(code=code, message=message))

    def then(self, fn: Callable[[T], "MutationResult[U]"]) -> "MutationResult[U]":
        """Chain another mutation; a failure short-circuits."""
        if not self.success:
            return MutationResult(success=False, error=self.error)
        return fn(self.value)

    def value_or(self, default: T) -> T:
        """Return the new value, or ``default`` (usually the unchanged input) on failure."""
        return self.value if self.success else default
