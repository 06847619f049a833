"""
Configuration management for the LogicBoxes SDK.

Handles loading and validation of configuration files.
"""

from logicboxes.config.settings import (
    LoggingConfig,
    LogicBoxesConfig,
    ResellerConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "LoggingConfig",
    "LogicBoxesConfig",
    "ResellerConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
