"""Observability: structured logging and distributed tracing.

Provides standardized observability primitives using structlog for logging
and OpenTelemetry for tracing.
"""

from callwatch.observability.logging import (
    PIIRedactor,
    add_trace_context,
    get_logger,
    setup_logging,
)
from callwatch.observability.tracing import (
    INSTRUMENTATION_NAME,
    get_current_span_id,
    get_current_trace_id,
    get_tracer,
    reset_tracing,
    setup_tracing,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "add_trace_context",
    "PIIRedactor",
    # Tracing
    "INSTRUMENTATION_NAME",
    "setup_tracing",
    "get_tracer",
    "reset_tracing",
    "get_current_trace_id",
    "get_current_span_id",
]
