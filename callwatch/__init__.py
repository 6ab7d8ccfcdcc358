"""callwatch: call interception with structured logging and tracing.

Wraps arbitrary invocations with an OpenTelemetry span and structlog
entry/exit records, guaranteeing the span is ended on every exit path.
"""

from callwatch.interceptor import CallInterceptor, InvocationMetadata, traced

__version__ = "0.1.0"

__all__ = ["CallInterceptor", "InvocationMetadata", "traced", "__version__"]
