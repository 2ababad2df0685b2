"""Failure variants reported by the checks.

Every check either passes or returns exactly one of these. Each variant
carries the structured detail of what went wrong and a human-readable
`message` for the console.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

INVALID_DATA_ARRAY_MESSAGE = "Response body does not have a valid 'data' array."
EMPTY_DATA_ARRAY_MESSAGE = "Data array is empty."


class FailureKind(Enum):
    """Error types for check failures."""

    TRANSPORT = "transport"
    SHAPE = "shape"
    ASSERTION = "assertion"


@dataclass(frozen=True)
class TransportFailure:
    """The HTTP request itself failed (DNS, refused connection, timeout)."""

    kind: ClassVar[FailureKind] = FailureKind.TRANSPORT

    url: str
    reason: str

    @property
    def message(self) -> str:
        return self.reason

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ShapeMismatch:
    """A response arrived but its body is not the expected envelope."""

    kind: ClassVar[FailureKind] = FailureKind.SHAPE

    reason: str

    @property
    def message(self) -> str:
        return self.reason

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class AssertionFailure:
    """A well-formed response failed a content expectation."""

    kind: ClassVar[FailureKind] = FailureKind.ASSERTION

    description: str
    expected: Any
    actual: Any
    detail: str

    @property
    def message(self) -> str:
        return self.detail

    def __str__(self) -> str:
        return self.message


CheckFailure = TransportFailure | ShapeMismatch | AssertionFailure
