"""UserStore decorator that routes every operation through a CallInterceptor."""

from callwatch.interceptor import CallInterceptor, InvocationMetadata
from callwatch.users.models import ApplicationUser
from callwatch.users.store import UserStore


class InstrumentedUserStore(UserStore):
    """Traces and logs each call made to a wrapped UserStore.

    Spans are named "{module}.{StoreClass}.{operation}" after the wrapped
    store, e.g. "callwatch.users.stores.inmemory.InMemoryUserStore.find_by_id".
    """

    def __init__(self, store: UserStore, interceptor: CallInterceptor | None = None) -> None:
        self._store = store
        self._interceptor = interceptor if interceptor is not None else CallInterceptor()
        store_type = type(store)
        self._qualifier = f"{store_type.__module__}.{store_type.__qualname__}"

    def _metadata(self, operation: str) -> InvocationMetadata:
        return InvocationMetadata(
            operation_qualifier=self._qualifier, short_signature=operation
        )

    def create(self, user: ApplicationUser) -> ApplicationUser:
        return self._interceptor.intercept(
            lambda: self._store.create(user), self._metadata("create")
        )

    def find_by_name(self, name: str) -> list[ApplicationUser]:
        return self._interceptor.intercept(
            lambda: self._store.find_by_name(name), self._metadata("find_by_name")
        )

    def find_by_id(self, user_id: int) -> ApplicationUser | None:
        return self._interceptor.intercept(
            lambda: self._store.find_by_id(user_id), self._metadata("find_by_id")
        )

    def find_by_email(self, email: str) -> ApplicationUser | None:
        return self._interceptor.intercept(
            lambda: self._store.find_by_email(email), self._metadata("find_by_email")
        )

    def find_by_active_flag(self, active_flag: bool) -> list[ApplicationUser]:
        return self._interceptor.intercept(
            lambda: self._store.find_by_active_flag(active_flag),
            self._metadata("find_by_active_flag"),
        )
