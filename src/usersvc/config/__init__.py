"""設定管理モジュール"""

from usersvc.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from usersvc.config.models import Config, LoggingConfig, UserSeed

__all__ = [
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LoggingConfig",
    "UserSeed",
    "expand_env_vars",
    "load_config",
]
