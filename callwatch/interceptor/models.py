"""Interception data models."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InvocationMetadata(BaseModel):
    """Naming context for an intercepted call.

    Used only to label the span and the log records; the interceptor never
    inspects the invocation itself.
    """

    model_config = ConfigDict(frozen=True)

    operation_qualifier: str = Field(
        ..., min_length=1, description="Declaring type or module, e.g. 'pkg.Foo'"
    )
    short_signature: str = Field(
        ..., min_length=1, description="Short form of the call, e.g. 'bar()'"
    )

    @property
    def span_name(self) -> str:
        """Span name, "{operation_qualifier}.{short_signature}"."""
        return f"{self.operation_qualifier}.{self.short_signature}"

    @classmethod
    def from_callable(cls, func: Callable[..., Any]) -> "InvocationMetadata":
        """Derive metadata from a function or method.

        The qualifier is the defining module plus any enclosing class path,
        the short signature is the bare function name:

            pkg.users.InMemoryUserStore.find_by_id
            -> ("pkg.users.InMemoryUserStore", "find_by_id")
        """
        name = getattr(func, "__name__", type(func).__name__)
        qualname = getattr(func, "__qualname__", name)
        enclosing = qualname.rpartition(".")[0]
        module = getattr(func, "__module__", None)

        qualifier = ".".join(part for part in (module, enclosing) if part)
        return cls(operation_qualifier=qualifier or name, short_signature=name)
