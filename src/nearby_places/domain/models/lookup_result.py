"""Lookup result domain model."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from nearby_places.domain.models.error_details import ErrorDetails, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of an asynchronous lookup: either a value or an error.

    Services always hand one of these back, so a caller never waits on a
    completion that does not come.
    """

    value: T | None = None
    error: ErrorDetails | None = None

    @property
    def ok(self) -> bool:
        """True when the lookup produced a value."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "LookupResult[T]":
        """Wrap a successful value."""
        return cls(value=value)

    @classmethod
    def failure(
        cls, kind: ErrorKind, reason: str, status_code: int | None = None
    ) -> "LookupResult[T]":
        """Wrap an error."""
        return cls(error=ErrorDetails(kind=kind, reason=reason, status_code=status_code))
