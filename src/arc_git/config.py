"""Configuration loading and management for arc-git.

This module provides configuration discovery and validation for the
generative backend. Configuration sources are merged in priority order:
    1. Defaults (defined in AIConfig)
    2. Global config (~/.arc-git.toml, [ai] table)
    3. Project config (arc-git.toml in the repository, [ai] table)
    4. Explicit config file (--config)
    5. Environment variables (ARC_AI_* prefix)
    6. CLI overrides (passed as kwargs, None values ignored)

Example:
    >>> config = load_config(provider="openrouter", api_key="sk-or-...")
    >>> config.provider
    'openrouter'
    >>> validate_config(config)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

ENV_PREFIX = "ARC_AI_"
CONFIG_FILENAME = "arc-git.toml"

# provider name -> (litellm route prefix, provider-specific API key variable)
PROVIDERS: dict[str, tuple[str, str]] = {
    "anthropic": ("anthropic", "ANTHROPIC_API_KEY"),
    "claude": ("anthropic", "ANTHROPIC_API_KEY"),
    "openrouter": ("openrouter", "OPENROUTER_API_KEY"),
    "openai": ("openai", "OPENAI_API_KEY"),
}


@dataclass(frozen=True)
class AIConfig:
    """Effective configuration for one arc-git invocation.

    Attributes:
        provider: Backend provider name (anthropic, claude, openrouter, openai)
        model: Model identifier; None means the annotation default model
        api_key: Credential for the provider
        namespace: git notes ref the annotations are stored under
        max_diff_chars: Truncate diffs longer than this before prompting
            (None = send the full diff)
    """

    provider: str = "anthropic"
    model: Optional[str] = None
    api_key: Optional[str] = None
    namespace: str = "ai"
    max_diff_chars: Optional[int] = None

    @property
    def route_prefix(self) -> str:
        """litellm route prefix for the configured provider."""
        return PROVIDERS[self.provider.lower()][0]

    def redacted(self) -> dict[str, Any]:
        """Field dict safe for logging."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if data["api_key"]:
            data["api_key"] = "***"
        return data


def load_config(
    config_file: Optional[Path] = None,
    project_dir: Optional[Path] = None,
    **overrides: Any,
) -> AIConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        project_dir: Directory holding the project arc-git.toml (default:
            current directory; the CLI passes the repository path)
        **overrides: Direct overrides (typically from CLI flags); None
            values are ignored so unset flags never clobber file settings

    Returns:
        AIConfig instance (not yet validated, see validate_config)

    Raises:
        ConfigurationError: If a config file is missing, malformed, or
            contains unknown keys
        InvalidConfigError: If a value has the wrong type
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_ai_table(global_config, "global config"))

    project_config = (project_dir or Path.cwd()) / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_ai_table(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_ai_table(config_file, "config file"))

    merged.update(_load_env_vars())

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = AIConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")

    _check_types(config)

    if not config.api_key:
        provider = PROVIDERS.get(config.provider.lower())
        if provider is not None:
            env_key = os.environ.get(provider[1])
            if env_key:
                config = replace(config, api_key=env_key)

    return config


def validate_config(config: AIConfig) -> None:
    """Check that a request can be issued with this configuration.

    Raises:
        InvalidConfigError: On a wrongly typed field, an empty or unknown
            provider, a missing credential, an empty namespace, or a
            non-positive diff limit
    """
    _check_types(config)
    if not config.provider or not config.provider.strip():
        raise InvalidConfigError("provider", config.provider, "provider must not be empty")
    if config.provider.lower() not in PROVIDERS:
        raise InvalidConfigError(
            "provider",
            config.provider,
            f"expected one of: {', '.join(sorted(PROVIDERS))}",
        )
    if not config.api_key:
        env_name = PROVIDERS[config.provider.lower()][1]
        raise InvalidConfigError(
            "api_key",
            "<missing>",
            f"set --api-key, {ENV_PREFIX}API_KEY or {env_name}",
        )
    if config.model is not None and not config.model.strip():
        raise InvalidConfigError("model", config.model, "model must not be empty")
    if not config.namespace or not config.namespace.strip():
        raise InvalidConfigError("namespace", config.namespace, "namespace must not be empty")
    if config.max_diff_chars is not None and config.max_diff_chars < 1:
        raise InvalidConfigError(
            "max_diff_chars", config.max_diff_chars, "must be at least 1"
        )


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from ARC_AI_* environment variables.

    Supported environment variables:
        ARC_AI_PROVIDER: str
        ARC_AI_MODEL: str
        ARC_AI_API_KEY: str
        ARC_AI_NAMESPACE: str
        ARC_AI_MAX_DIFF_CHARS: int

    Returns:
        Dict of field_name -> parsed_value for any ARC_AI_* vars found.
    """
    type_hints = get_type_hints(AIConfig)

    result: dict[str, Any] = {}

    for f in fields(AIConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None or env_value == "":
            continue

        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _check_types(config: AIConfig) -> None:
    """Reject file values whose TOML type does not match the field."""
    type_hints = get_type_hints(AIConfig)
    for f in fields(AIConfig):
        value = getattr(config, f.name)
        if value is None:
            continue
        expected = _base_type(type_hints[f.name])
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, expected):
            raise InvalidConfigError(f.name, value, f"expected {expected.__name__}")


def _base_type(type_hint: Any) -> Any:
    # Handle Optional[X] which is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            return non_none_types[0]
    return type_hint


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type."""
    type_hint = _base_type(type_hint)

    if type_hint is int:
        return int(value)

    return value


def _load_ai_table(path: Path, label: str) -> dict[str, Any]:
    """Load the [ai] table of a TOML file."""
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")

    table = data.get("ai", {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"Invalid {label} '{path}': [ai] must be a table")
    return table


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML as dict

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
