"""Root settings model for callwatch configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from callwatch.config.models.interceptor import InterceptorConfig
from callwatch.config.models.observability import ObservabilityConfig


class Settings(BaseSettings):
    """Root configuration object containing all nested configuration sections.

    A bare Settings() reads model defaults and CALLWATCH_* environment
    variables only. Use settings_from_config to layer TOML files underneath
    the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALLWATCH_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="callwatch", description="Application name for logging/tracing")

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )
    interceptor: InterceptorConfig = Field(
        default_factory=InterceptorConfig,
        description="Call interceptor configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Constructor arguments beat CALLWATCH_* environment variables."""
        return (init_settings, env_settings)


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Build Settings with a loaded TOML mapping below the environment.

    Priority order (highest to lowest):
    1. CALLWATCH_* environment variables
    2. config (merged config/*.toml contents)
    3. model defaults
    """

    class FileBackedSettings(Settings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (
                init_settings,
                env_settings,
                InitSettingsSource(settings_cls, init_kwargs=config),
            )

    return FileBackedSettings()
