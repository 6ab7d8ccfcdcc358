"""Configuration loading for callwatch.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from callwatch.config import get_settings

    settings = get_settings()
    service = settings.observability.tracing.service_name
"""

from functools import lru_cache

from callwatch.config.loader import load_config
from callwatch.config.settings import Settings, settings_from_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{CALLWATCH_ENV}.toml (environment overrides)
    4. CALLWATCH_* environment variables (runtime overrides)

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    return settings_from_config(load_config())


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "settings_from_config", "Settings"]
