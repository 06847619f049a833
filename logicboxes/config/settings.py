"""
Configuration management for the LogicBoxes SDK.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from logicboxes.exceptions import InvalidConfigurationError
from logicboxes.logging_config import get_logger

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.
    
    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}
    
    Args:
        value: Configuration value (string, dict, list, or other)
    
    Returns:
        Value with environment variables expanded
    
    Examples:
        "${RESELLER_ID}" -> value of RESELLER_ID env var
        "${LOGICBOXES_PRODUCTION:false}" -> value of LOGICBOXES_PRODUCTION or "false"
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'
        
        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)
        
        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("", "0", "false", "no", "off"):
            return False
    raise InvalidConfigurationError(f"expected a boolean, got {value!r}")


@dataclass
class ResellerConfig:
    """Reseller account credentials and endpoint selection."""
    
    reseller_id: str = ""
    api_key: str = ""
    is_production: bool = False
    timeout: int = 30


@dataclass
class LoggingConfig:
    """Logging configuration."""
    
    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class LogicBoxesConfig:
    """Main SDK configuration."""
    
    reseller: ResellerConfig = field(default_factory=ResellerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.logicboxes/config.yaml")


def get_default_config() -> LogicBoxesConfig:
    """
    Get default configuration.
    
    Credentials default to the RESELLER_ID and API_KEY environment variables.
    
    Returns:
        LogicBoxesConfig: Default configuration object
    """
    return LogicBoxesConfig(
        reseller=ResellerConfig(
            reseller_id=os.environ.get("RESELLER_ID", ""),
            api_key=os.environ.get("API_KEY", ""),
        ),
        logging=LoggingConfig(),
    )


def load_config(config_path: Optional[str] = None) -> LogicBoxesConfig:
    """
    Load configuration from YAML file with validation.
    
    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.
    
    Args:
        config_path: Path to configuration file. If None, uses default path.
    
    Returns:
        LogicBoxesConfig: Loaded and validated configuration
    
    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()
    
    config_path = os.path.expanduser(config_path)
    
    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()
    
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        )
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        )
    
    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()
    
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping"
        )
    
    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")
    
    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e
    
    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> LogicBoxesConfig:
    """
    Build LogicBoxesConfig from dictionary loaded from YAML.
    
    Merges user configuration with defaults.
    
    Args:
        config_data: Dictionary loaded from YAML file
    
    Returns:
        LogicBoxesConfig: Configuration object
    """
    defaults = get_default_config()
    
    reseller_data = config_data.get('reseller') or {}
    reseller = ResellerConfig(
        reseller_id=str(reseller_data.get('reseller_id', defaults.reseller.reseller_id) or ""),
        api_key=str(reseller_data.get('api_key', defaults.reseller.api_key) or ""),
        is_production=_as_bool(reseller_data.get('is_production', defaults.reseller.is_production)),
        timeout=int(reseller_data.get('timeout', defaults.reseller.timeout)),
    )
    
    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', defaults.logging.level)),
        file=str(logging_data.get('file', defaults.logging.file) or ""),
        json_format=_as_bool(logging_data.get('json_format', defaults.logging.json_format)),
    )
    
    return LogicBoxesConfig(reseller=reseller, logging=logging)


def _validate_config(config: LogicBoxesConfig) -> None:
    """
    Validate configuration values.
    
    Args:
        config: Configuration to validate
    
    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if config.reseller.timeout <= 0:
        raise InvalidConfigurationError(
            f"timeout must be positive, got {config.reseller.timeout}"
        )
    
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )
