"""Call interceptor: tracing and structured logging around an invocation.

Every intercepted call gets its own span, named after the caller-supplied
metadata and made current for the duration of the call. Entry and exit are
logged at INFO. Invalid-input failures (ValueError by default) are recorded
on the span, logged at ERROR and re-raised; any other failure propagates
untouched. The span is ended exactly once on every exit path.

Example usage:

    interceptor = CallInterceptor(tracer=my_tracer)
    metadata = InvocationMetadata(operation_qualifier="pkg.Foo", short_signature="bar()")
    result = interceptor.intercept(lambda: foo.bar(), metadata)
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from opentelemetry import trace
from opentelemetry.trace import Span, Tracer

from callwatch.interceptor.models import InvocationMetadata
from callwatch.interceptor.outcome import Outcome, OutcomeKind
from callwatch.observability.logging import get_logger
from callwatch.observability.tracing import INSTRUMENTATION_NAME, get_tracer

T = TypeVar("T")

ERROR_MESSAGE_ATTRIBUTE = "error.message"

ENTRY_TEMPLATE = "Entering method: %s.%s()"
EXIT_TEMPLATE = "Exiting method: %s.%s() with result: %s"
CLASSIFIED_FAILURE_TEMPLATE = "Illegal argument: %s in %s.%s()"

UNPRINTABLE_RESULT = "[FAILED str()]"


def describe_result(value: Any) -> str:
    """str(value), or a placeholder when the value cannot be stringified."""
    try:
        return str(value)
    except Exception:
        return f"{UNPRINTABLE_RESULT} {type(value).__qualname__}"


class CallInterceptor:
    """Wraps invocations with a span and entry/exit log records.

    Holds no mutable state: the tracer, logger and classified exception
    types are fixed at construction, so one instance may be shared between
    threads provided the tracer and log sink are thread-safe.
    """

    def __init__(
        self,
        tracer: Tracer | None = None,
        *,
        classified_errors: tuple[type[Exception], ...] = (ValueError,),
        logger: structlog.stdlib.BoundLogger | None = None,
        instrumentation_name: str = INSTRUMENTATION_NAME,
    ) -> None:
        """Create an interceptor.

        Args:
            tracer: Tracer used to start spans. When omitted the default
                tracer is looked up by instrumentation name; a supplied
                tracer never requires the default backend to be configured.
            classified_errors: Exception types treated as invalid input
            logger: Log sink, defaults to this module's structlog logger
            instrumentation_name: Scope name for the default tracer
        """
        self._tracer = tracer if tracer is not None else get_tracer(instrumentation_name)
        self._classified_errors = tuple(classified_errors)
        self._logger = logger if logger is not None else get_logger(__name__)

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    @property
    def classified_errors(self) -> tuple[type[Exception], ...]:
        return self._classified_errors

    def intercept(self, invocation: Callable[[], T], metadata: InvocationMetadata) -> T:
        """Run invocation once inside a span and return its result unchanged.

        Raises:
            Whatever the invocation raises, as the same exception object.
        """
        qualifier = metadata.operation_qualifier
        signature = metadata.short_signature

        span = self._tracer.start_span(metadata.span_name)
        try:
            with trace.use_span(
                span,
                end_on_exit=False,
                record_exception=False,
                set_status_on_exception=False,
            ):
                self._logger.info(
                    ENTRY_TEMPLATE, qualifier, signature,
                    qualifier=qualifier, signature=signature,
                )

                outcome = Outcome.capture(invocation, self._classified_errors)

                if outcome.kind is OutcomeKind.SUCCESS:
                    self._logger.info(
                        EXIT_TEMPLATE, qualifier, signature, describe_result(outcome.value),
                        qualifier=qualifier, signature=signature,
                    )
                elif outcome.kind is OutcomeKind.CLASSIFIED_FAILURE:
                    self._record_classified_failure(span, outcome, qualifier, signature)

                return outcome.unwrap()
        finally:
            span.end()

    def _record_classified_failure(
        self,
        span: Span,
        outcome: Outcome,
        qualifier: str,
        signature: str,
    ) -> None:
        error = outcome.error
        span.record_exception(error)
        span.set_attribute(
            ERROR_MESSAGE_ATTRIBUTE, f"Illegal argument in {qualifier}.{signature}"
        )
        self._logger.error(
            CLASSIFIED_FAILURE_TEMPLATE, error, qualifier, signature,
            qualifier=qualifier, signature=signature,
            error_type=type(error).__name__,
        )

    def wrap(
        self,
        func: Callable[..., T],
        metadata: InvocationMetadata | None = None,
    ) -> Callable[..., T]:
        """Return a callable that intercepts every call to func.

        Metadata is derived from func when not given.
        """
        resolved = metadata if metadata is not None else InvocationMetadata.from_callable(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return self.intercept(lambda: func(*args, **kwargs), resolved)

        return wrapper


def traced(
    func: Callable[..., T] | None = None,
    *,
    interceptor: CallInterceptor | None = None,
    metadata: InvocationMetadata | None = None,
) -> Any:
    """Decorator form of CallInterceptor.wrap.

    Usable bare or with arguments:

        @traced
        def load(...): ...

        @traced(interceptor=my_interceptor)
        def save(...): ...

    Without an interceptor, a default one is built on each call so the
    decorated function follows whatever tracing setup is active at call time.
    """

    def decorator(target: Callable[..., T]) -> Callable[..., T]:
        resolved = metadata if metadata is not None else InvocationMetadata.from_callable(target)

        @functools.wraps(target)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            active = interceptor if interceptor is not None else CallInterceptor()
            return active.intercept(lambda: target(*args, **kwargs), resolved)

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
