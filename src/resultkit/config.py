"""Layered configuration for resultkit.

Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

Environment variables use the ``RESULTKIT`` prefix with ``__`` between levels,
e.g. ``RESULTKIT__RENDER__MAX_LENGTH=200``.

Nothing is read until the application calls configure(). Until then
get_settings() returns ResultSettings() defaults, so library calls never touch
the environment or the filesystem and never fail because of configuration.

Usage:
    # Once, at application start-up
    configure()

    settings = get_settings()
    logger.log(settings.capture_log_level, "...")

    # Tests and embedding applications can swap settings wholesale
    set_settings(ResultSettings(render_max_length=80))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from resultkit.exceptions import ConfigurationError

_DEFAULTS: dict[str, object] = {
    "capture": {
        "log_level": "DEBUG",
    },
    "render": {
        "max_length": 0,
    },
}


@dataclass(frozen=True)
class ResultSettings:
    """Resolved library settings.

    Attributes:
        capture_log_level: Level at which try_catch/try_catch_async log a captured exception.
        render_max_length: Cap on rendered error text in unwrap messages. 0 means unlimited.
    """

    capture_log_level: int = logging.DEBUG
    render_max_length: int = 0


_DEFAULT_SETTINGS = ResultSettings()
_settings: ResultSettings | None = None


def create_config(
    yaml_path: str = "resultkit.yaml",
    env_prefix: str = "RESULTKIT",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        overrides: Values that take precedence over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _parse_log_level(raw: object) -> int:
    name = str(raw).strip().upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise ConfigurationError(f"Unknown capture.log_level: {raw!r}")
    return levels[name]


def _parse_max_length(raw: object) -> int:
    try:
        value = int(str(raw))
    except ValueError as e:
        raise ConfigurationError(f"render.max_length must be an integer, got {raw!r}") from e
    if value < 0:
        raise ConfigurationError(f"render.max_length must be >= 0, got {value}")
    return value


def load_settings(cfg: ConfigurationSet | None = None) -> ResultSettings:
    """Resolve settings from a configuration set.

    Raises:
        ConfigurationError: If a value is present but unusable.
    """
    if cfg is None:
        cfg = create_config()
    return ResultSettings(
        capture_log_level=_parse_log_level(cfg["capture.log_level"]),
        render_max_length=_parse_max_length(cfg["render.max_length"]),
    )


def configure(cfg: ConfigurationSet | None = None) -> ResultSettings:
    """Load settings from the layered configuration and make them active.

    Reads the environment and ``resultkit.yaml``; library calls never do.
    Call it once at application start-up.

    Raises:
        ConfigurationError: If a value is present but unusable.
    """
    settings = load_settings(cfg)
    set_settings(settings)
    return settings


def get_settings() -> ResultSettings:
    """Return the active settings, or defaults if configure() was never called."""
    if _settings is None:
        return _DEFAULT_SETTINGS
    return _settings


def set_settings(settings: ResultSettings) -> None:
    """Make settings the active settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop active settings so get_settings() returns defaults again."""
    global _settings
    _settings = None
