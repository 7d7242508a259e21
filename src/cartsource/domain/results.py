"""Validation results returned by command handling.

A command is either accepted, yielding the aggregate ID (`Valid`), or rejected
with a domain error (`Invalid`). Rejections are returned, not raised, so the
caller decides whether to abort the command end-to-end.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from .errors import DomainError

T = TypeVar("T")
E = TypeVar("E", bound=DomainError)


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """An accepted command."""

    value: T

    @property
    def is_valid(self) -> bool:
        """Always True."""
        return True


@dataclass(frozen=True, slots=True)
class Invalid(Generic[E]):
    """A rejected command, carrying the reason."""

    error: E

    @property
    def is_valid(self) -> bool:
        """Always False."""
        return False


CommandResult: TypeAlias = Valid[str] | Invalid[DomainError]
