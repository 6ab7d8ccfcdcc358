"""Tests for InstrumentedUserStore."""

import pytest
from structlog.testing import capture_logs

from callwatch.interceptor import ERROR_MESSAGE_ATTRIBUTE
from callwatch.users import ApplicationUser, InMemoryUserStore, InstrumentedUserStore

QUALIFIER = "callwatch.users.stores.inmemory.InMemoryUserStore"


@pytest.fixture
def store(interceptor) -> InstrumentedUserStore:
    return InstrumentedUserStore(InMemoryUserStore(), interceptor)


class TestInstrumentedUserStore:
    """Every store operation is intercepted."""

    def test_create_returns_stored_user(self, store, span_exporter):
        user = store.create(ApplicationUser(name="Ada", email="ada@example.com"))

        assert user.id == 1
        assert span_exporter.get_finished_spans()[0].name == f"{QUALIFIER}.create"

    def test_each_operation_gets_a_span(self, store, span_exporter):
        store.create(ApplicationUser(name="Ada", email="ada@example.com"))
        store.find_by_name("Ada")
        store.find_by_id(1)
        store.find_by_email("ada@example.com")
        store.find_by_active_flag(True)

        names = [span.name.removeprefix(f"{QUALIFIER}.") for span in span_exporter.get_finished_spans()]
        assert names == [
            "create",
            "find_by_name",
            "find_by_id",
            "find_by_email",
            "find_by_active_flag",
        ]

    def test_lookup_results_pass_through(self, store):
        created = store.create(ApplicationUser(name="Ada", email="ada@example.com"))
        assert store.find_by_id(created.id) == created
        assert store.find_by_email("missing@example.com") is None

    def test_invalid_input_is_classified(self, store, span_exporter):
        with capture_logs() as logs:
            with pytest.raises(ValueError, match="positive"):
                store.find_by_id(-1)

        span = span_exporter.get_finished_spans()[0]
        assert span.attributes[ERROR_MESSAGE_ATTRIBUTE] == f"Illegal argument in {QUALIFIER}.find_by_id"
        assert logs[-1]["log_level"] == "error"
        assert "user id must be positive" in logs[-1]["event"]

    def test_exit_log_contains_result(self, store):
        with capture_logs() as logs:
            store.find_by_name("nobody")

        assert logs[-1]["event"] == f"Exiting method: {QUALIFIER}.find_by_name() with result: []"

    def test_default_interceptor(self):
        store = InstrumentedUserStore(InMemoryUserStore())
        assert store.find_by_active_flag(True) == []
