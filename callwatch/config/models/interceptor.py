"""Call interceptor configuration model."""

from pydantic import BaseModel, Field


class InterceptorConfig(BaseModel):
    """Call interceptor configuration."""

    instrumentation_name: str = Field(
        default="callwatch.interceptor",
        min_length=1,
        description="Instrumentation scope name used to obtain the tracer",
    )
