"""TOML configuration loader.

Files are layered: config/default.toml first, then config/{CALLWATCH_ENV}.toml
when present, merged key by key.
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

from callwatch.errors import ConfigurationError

CONFIG_DIR_ENV = "CALLWATCH_CONFIG_DIR"
ENVIRONMENT_ENV = "CALLWATCH_ENV"
DEFAULT_ENVIRONMENT = "development"

# How many directories above the working directory to search for config/
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the configuration directory.

    CALLWATCH_CONFIG_DIR wins when set and must exist. Otherwise the first
    'config/' found in the working directory or its parents, falling back to
    a relative 'config'.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.exists():
            raise ConfigurationError(f"Config directory not found: {override}", path=override)
        return path

    cwd = Path.cwd()
    for directory in [cwd, *cwd.parents][:SEARCH_DEPTH]:
        candidate = directory / "config"
        if candidate.exists():
            return candidate

    return Path("config")


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        ConfigurationError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Configuration file not found: {file_path}", path=str(file_path)
        ) from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into shared tables."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_files(config_dir: Path, env: str) -> list[Path]:
    """Files to load, lowest precedence first.

    Raises:
        ConfigurationError: If config_dir has no default.toml
    """
    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise ConfigurationError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}.",
            path=str(default_path),
        )

    env_path = config_dir / f"{env}.toml"
    return [default_path, env_path] if env_path.exists() else [default_path]


def load_config() -> dict[str, Any]:
    """Load and merge the configuration files for the current environment."""
    files = config_files(get_config_dir(), get_environment())
    return reduce(deep_merge, (load_toml(path) for path in files), {})
