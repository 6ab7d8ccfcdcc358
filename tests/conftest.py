"""Shared test fixtures for the callwatch test suite."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer

from callwatch.interceptor import CallInterceptor, InvocationMetadata


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults so capture_logs sees every logger."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def reset_configuration() -> Generator[None, None, None]:
    """Clear the settings cache and configured tracer around each test."""
    from callwatch.config import get_settings
    from callwatch.observability.tracing import reset_tracing

    get_settings.cache_clear()
    reset_tracing()
    yield
    get_settings.cache_clear()
    reset_tracing()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """In-memory exporter collecting every finished span."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter) -> Tracer:
    """SDK tracer exporting synchronously to span_exporter."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")


@pytest.fixture
def mock_span() -> MagicMock:
    return MagicMock(name="span")


@pytest.fixture
def mock_tracer(mock_span: MagicMock) -> MagicMock:
    """Tracer double whose start_span always returns mock_span."""
    tracer = MagicMock(name="tracer")
    tracer.start_span.return_value = mock_span
    return tracer


@pytest.fixture
def interceptor(tracer: Tracer) -> CallInterceptor:
    return CallInterceptor(tracer=tracer)


@pytest.fixture
def metadata() -> InvocationMetadata:
    return InvocationMetadata(operation_qualifier="pkg.Foo", short_signature="bar()")
