"""Tagged result of running an intercepted invocation."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class OutcomeKind(str, Enum):
    """How an invocation terminated."""

    SUCCESS = "success"
    CLASSIFIED_FAILURE = "classified_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass(frozen=True)
class Outcome:
    """Result of a single invocation: a value or the exception it raised."""

    kind: OutcomeKind
    value: Any = None
    error: Exception | None = None

    @classmethod
    def capture(
        cls,
        invocation: Callable[[], Any],
        classified: tuple[type[Exception], ...],
    ) -> "Outcome":
        """Invoke exactly once and classify how it terminated.

        Only Exception subclasses are captured. Anything else
        (KeyboardInterrupt, SystemExit, GeneratorExit) propagates.
        """
        try:
            value = invocation()
        except classified as e:
            return cls(OutcomeKind.CLASSIFIED_FAILURE, error=e)
        except Exception as e:
            return cls(OutcomeKind.UNEXPECTED_FAILURE, error=e)
        return cls(OutcomeKind.SUCCESS, value=value)

    def unwrap(self) -> Any:
        """Return the value, or re-raise the captured exception object."""
        if self.error is not None:
            raise self.error
        return self.value
