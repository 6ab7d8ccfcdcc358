"""Tests for CallInterceptor.wrap and the traced decorator."""

from unittest.mock import patch

import pytest

from callwatch.interceptor import CallInterceptor, InvocationMetadata, traced


def add(a, b=0):
    """Add two numbers."""
    return a + b


class TestWrap:
    """Tests for CallInterceptor.wrap."""

    def test_passes_arguments_and_returns_result(self, interceptor):
        wrapped = interceptor.wrap(add)
        assert wrapped(2, b=3) == 5

    def test_preserves_function_identity(self, interceptor):
        wrapped = interceptor.wrap(add)
        assert wrapped.__name__ == "add"
        assert wrapped.__doc__ == "Add two numbers."
        assert wrapped.__wrapped__ is add

    def test_derives_span_name(self, interceptor, span_exporter):
        interceptor.wrap(add)(1)
        assert span_exporter.get_finished_spans()[0].name == f"{add.__module__}.add"

    def test_explicit_metadata(self, interceptor, span_exporter):
        metadata = InvocationMetadata(operation_qualifier="calc", short_signature="add(..)")
        interceptor.wrap(add, metadata)(1)
        assert span_exporter.get_finished_spans()[0].name == "calc.add(..)"

    def test_one_span_per_call(self, interceptor, span_exporter):
        wrapped = interceptor.wrap(add)
        wrapped(1)
        wrapped(2)
        assert len(span_exporter.get_finished_spans()) == 2


class TestTraced:
    """Tests for the traced decorator."""

    def test_with_interceptor(self, interceptor, span_exporter):
        @traced(interceptor=interceptor)
        def greet(name):
            return f"hello {name}"

        assert greet("ada") == "hello ada"
        span = span_exporter.get_finished_spans()[0]
        assert span.name.endswith("greet")
        assert "<locals>" in span.name

    def test_method_span_includes_class(self, interceptor, span_exporter):
        class Service:
            @traced(interceptor=interceptor)
            def run(self, x):
                return x + 1

        assert Service().run(1) == 2
        assert span_exporter.get_finished_spans()[0].name.endswith("Service.run")

    def test_bare_decorator_uses_default_tracer(self, tracer, span_exporter):
        """Bare @traced resolves the default tracer at call time."""

        @traced
        def ping():
            return "pong"

        with patch("callwatch.interceptor.interceptor.get_tracer", return_value=tracer):
            assert ping() == "pong"

        assert len(span_exporter.get_finished_spans()) == 1

    def test_failure_propagates(self, interceptor):
        error = ValueError("bad")

        @traced(interceptor=interceptor)
        def fail():
            raise error

        with pytest.raises(ValueError) as exc_info:
            fail()
        assert exc_info.value is error

    def test_explicit_metadata(self, interceptor, span_exporter):
        metadata = InvocationMetadata(operation_qualifier="pkg.Foo", short_signature="bar()")

        @traced(interceptor=interceptor, metadata=metadata)
        def anything():
            return None

        anything()
        assert span_exporter.get_finished_spans()[0].name == "pkg.Foo.bar()"
