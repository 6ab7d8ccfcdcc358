"""Configuration section models."""

from callwatch.config.models.interceptor import InterceptorConfig
from callwatch.config.models.observability import (
    LoggingConfig,
    ObservabilityConfig,
    TracingConfig,
)

__all__ = [
    "InterceptorConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "TracingConfig",
]
