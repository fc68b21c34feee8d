"""Configuration for classpath-closure."""

from settings.config import (
    CONFIG_FILENAME,
    ClosureConfig,
    ConfigError,
    load_config,
    resolve_graph_path,
)

__all__ = [
    "CONFIG_FILENAME",
    "ClosureConfig",
    "ConfigError",
    "load_config",
    "resolve_graph_path",
]
