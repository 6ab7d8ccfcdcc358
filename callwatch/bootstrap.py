"""Bootstrap module for callwatch setup.

Applies the observability settings (structlog + OpenTelemetry) and returns
a ready CallInterceptor.

Example usage:

    from callwatch.bootstrap import bootstrap

    interceptor = bootstrap()
    users = InstrumentedUserStore(InMemoryUserStore(), interceptor)
"""

from opentelemetry import trace

from callwatch.config import Settings, get_settings
from callwatch.interceptor import CallInterceptor
from callwatch.observability.logging import get_logger, setup_logging
from callwatch.observability.tracing import setup_tracing

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> CallInterceptor:
    """Configure logging and tracing, then build a CallInterceptor.

    Args:
        settings: Settings to apply (default: loaded from config/ and env)

    Returns:
        Interceptor bound to the configured tracer. With tracing disabled
        the tracer comes from the global provider, a no-op unless one has
        been installed elsewhere.
    """
    settings = settings if settings is not None else get_settings()
    log_cfg = settings.observability.logging
    trace_cfg = settings.observability.tracing
    instrumentation_name = settings.interceptor.instrumentation_name

    setup_logging(
        level=log_cfg.level,
        format=log_cfg.format,
        redact_pii=log_cfg.redact_pii,
        include_trace_id=log_cfg.include_trace_id,
    )

    if trace_cfg.enabled:
        tracer = setup_tracing(
            service_name=trace_cfg.service_name,
            otlp_endpoint=trace_cfg.otlp_endpoint,
            console_export=trace_cfg.console_export,
            instrumentation_name=instrumentation_name,
        )
    else:
        tracer = trace.get_tracer(instrumentation_name)

    logger.info(
        "callwatch_bootstrapped",
        app_name=settings.app_name,
        tracing_enabled=trace_cfg.enabled,
        instrumentation_name=instrumentation_name,
    )

    return CallInterceptor(tracer=tracer, instrumentation_name=instrumentation_name)
