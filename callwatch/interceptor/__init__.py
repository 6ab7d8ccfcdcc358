"""Call interception: spans and structured logs around explicit invocations."""

from callwatch.interceptor.interceptor import (
    ERROR_MESSAGE_ATTRIBUTE,
    CallInterceptor,
    traced,
)
from callwatch.interceptor.models import InvocationMetadata
from callwatch.interceptor.outcome import Outcome, OutcomeKind

__all__ = [
    "CallInterceptor",
    "ERROR_MESSAGE_ATTRIBUTE",
    "InvocationMetadata",
    "Outcome",
    "OutcomeKind",
    "traced",
]
