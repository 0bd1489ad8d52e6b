"""Wave option loading, defaulting and validation."""

from wavegen.configs.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    GradientConfig,
    WaveConfig,
    load_config,
    normalize_options,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "GradientConfig",
    "WaveConfig",
    "load_config",
    "normalize_options",
]
