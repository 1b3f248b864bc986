"""
Tagged field results.

Every layer of a scraper's plugin pipeline receives and returns an
``Outcome`` instead of letting exceptions travel through the layers. Site
adapters still raise ordinary exceptions; ``Outcome.capture`` turns them into
tagged results at the bottom of the pipeline and ``Outcome.unwrap`` turns the
final result back into a value or a raised exception at the top.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import FillPluginException, StaticValueException


class OutcomeKind(enum.Enum):
    """What happened when a field was extracted."""

    FOUND = "found"
    SOURCE_ABSENT = "source_absent"
    NOT_IMPLEMENTED = "not_implemented"
    DECLARED_CONSTANT = "declared_constant"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome:
    """The result of one field extraction."""

    kind: OutcomeKind
    value: Any = None
    error: BaseException | None = None

    @classmethod
    def found(cls, value: Any) -> Outcome:
        return cls(OutcomeKind.FOUND, value=value)

    @classmethod
    def from_error(cls, error: Exception) -> Outcome:
        """Classify an exception raised by an extractor."""
        if isinstance(error, NotImplementedError):
            return cls(OutcomeKind.NOT_IMPLEMENTED, error=error)
        if isinstance(error, FillPluginException):
            return cls(OutcomeKind.SOURCE_ABSENT, error=error)
        if isinstance(error, StaticValueException):
            return cls(
                OutcomeKind.DECLARED_CONSTANT,
                value=error.return_value,
                error=error,
            )
        return cls(OutcomeKind.FAILED, error=error)

    @classmethod
    def capture(cls, func: Callable[[], Any]) -> Outcome:
        """Run ``func`` and wrap its return value or exception."""
        try:
            return cls.found(func())
        except Exception as err:
            return cls.from_error(err)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.FOUND

    @property
    def wants_fallback(self) -> bool:
        """Whether a fill plugin should consult an alternate source."""
        return self.kind in (OutcomeKind.NOT_IMPLEMENTED, OutcomeKind.SOURCE_ABSENT)

    def unwrap(self) -> Any:
        """Return the value, or raise the exception that caused the outcome."""
        if self.ok:
            return self.value
        if self.error is not None:
            raise self.error
        raise RuntimeError(f"Outcome {self.kind.value} carries no error")
