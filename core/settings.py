"""Load wizard settings from config/settings.yaml, with environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml

_DEFAULTS: dict[str, Any] = {
    "onboarding": {
        "mode": "ephemeral",
        "locale": "en",
    },
    "storage": {
        "host": "localhost",
        "port": 6379,
        "db": 0,
        "namespace": "",
        "socket_timeout": 5.0,
        "max_attempts": 20,
        "max_retry_seconds": 3600,
        "backoff_base": 0.1,
        "backoff_cap": 3.0,
    },
    "logging": {
        "file": "logs/onboarding.log",
        "level": "INFO",
        "log_to_console": False,
        "max_bytes": 10485760,  # 10 MB
        "backup_count": 3,
    },
}

# env var -> (dot path, converter)
_ENV_OVERRIDES: dict[str, tuple[str, Any]] = {
    "ONBOARDING_MODE": ("onboarding.mode", str),
    "ONBOARDING_LOCALE": ("onboarding.locale", str),
    "REDIS_HOST": ("storage.host", str),
    "REDIS_PORT": ("storage.port", int),
    "REDIS_DB": ("storage.db", int),
}

_cached: dict[str, Any] | None = None


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base recursively. Mutates base."""
    for key, value in overlay.items():
        if value is None:
            continue
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def get_default_settings() -> dict[str, Any]:
    """Return a deep copy of default settings."""
    return _deep_copy_nested(_DEFAULTS)


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Get a nested value by dot path (e.g. 'storage.host')."""
    current: Any = settings
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def _set_setting(settings: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current = settings
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def _apply_env_overrides(settings: dict[str, Any]) -> None:
    for env_name, (path, convert) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            _set_setting(settings, path, convert(raw.strip()))
        except ValueError as e:
            raise ValueError(f"Invalid value for {env_name}: {raw!r}") from e


def reload_settings() -> None:
    """Clear the settings cache. Call after config files or env vars change."""
    global _cached
    _cached = None


def load_settings(config_dir: Path | None = None) -> dict[str, Any]:
    """Load settings from config/settings.yaml. Returns merged defaults + file + env values."""
    global _cached
    if _cached is not None:
        return _cached

    if config_dir is None:
        config_dir = Path(__file__).resolve().parent.parent / "config"
    path = config_dir / "settings.yaml"

    result = get_default_settings()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                _deep_merge(result, data)
        except (yaml.YAMLError, OSError):
            pass

    _apply_env_overrides(result)

    _cached = result
    return result


def _deep_copy_nested(obj: Any) -> Any:
    """Return a deep copy of nested dicts/lists for defaults."""
    if isinstance(obj, dict):
        return {k: _deep_copy_nested(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_deep_copy_nested(x) for x in obj]
    return obj
