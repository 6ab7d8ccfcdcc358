"""OpenTelemetry distributed tracing setup.

Provides the tracer used by the call interceptor, span export
configuration and helpers to read the active trace context.
"""

import os

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Tracer

# Instrumentation scope name for the default tracer
INSTRUMENTATION_NAME = "callwatch.interceptor"

# Global tracer instance
_tracer: Tracer | None = None


def setup_tracing(
    service_name: str = "callwatch",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
    instrumentation_name: str = INSTRUMENTATION_NAME,
) -> Tracer:
    """Initialize OpenTelemetry tracing.

    Args:
        service_name: Name to identify this service in traces
        otlp_endpoint: OTLP gRPC endpoint (e.g., "localhost:4317")
                       Falls back to OTEL_EXPORTER_OTLP_ENDPOINT env var
        console_export: Also export spans to console (for debugging)
        instrumentation_name: Instrumentation scope of the returned tracer

    Returns:
        Configured Tracer instance
    """
    global _tracer

    resource = Resource.create({SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)

    endpoint = otlp_endpoint or os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT")
    if endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    # Take the tracer from our provider; the global one can only be set once
    _tracer = provider.get_tracer(instrumentation_name)

    return _tracer


def get_tracer(instrumentation_name: str = INSTRUMENTATION_NAME) -> Tracer:
    """Get the configured tracer, or the global tracer if not initialized.

    Without setup_tracing and without a globally installed provider the
    returned tracer is a no-op proxy.
    """
    if _tracer is None:
        return trace.get_tracer(instrumentation_name)
    return _tracer


def reset_tracing() -> None:
    """Forget the tracer configured by setup_tracing."""
    global _tracer
    _tracer = None


def get_current_trace_id() -> str | None:
    """Get the current trace ID as a hex string, or None outside a trace."""
    span = trace.get_current_span()
    if span and span.get_span_context().is_valid:
        return format(span.get_span_context().trace_id, "032x")
    return None


def get_current_span_id() -> str | None:
    """Get the current span ID as a hex string, or None outside a span."""
    span = trace.get_current_span()
    if span and span.get_span_context().is_valid:
        return format(span.get_span_context().span_id, "016x")
    return None
