"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from usersvc.config.models import DEFAULT_LOG_FORMAT, Config, LoggingConfig, UserSeed


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する"""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _parse_user_seed(item: Any, index: int) -> UserSeed:
    """users セクションの1要素を UserSeed に変換する

    Raises:
        ConfigValidationError: 要素が不正
    """
    parent = f"users[{index}]"
    if not isinstance(item, dict):
        raise ConfigValidationError(f"'{parent}' must be a mapping")

    user_id = _validate_required_field(item, "id", parent)
    # bool は int のサブクラスなので明示的に除外する
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise ConfigValidationError(f"'{parent}.id' must be an integer")

    name = _validate_required_field(item, "name", parent)
    if not isinstance(name, str):
        raise ConfigValidationError(f"'{parent}.name' must be a string")
    return UserSeed(id=user_id, name=name)


def _parse_logging(logging_data: Any) -> LoggingConfig:
    """logging セクションを LoggingConfig に変換する

    Raises:
        ConfigValidationError: セクションが不正
    """
    if not isinstance(logging_data, dict):
        raise ConfigValidationError("'logging' must be a mapping")

    level = logging_data.get("level", "INFO")
    if not isinstance(level, str):
        raise ConfigValidationError("'logging.level' must be a string")

    log_format = logging_data.get("format", DEFAULT_LOG_FORMAT)
    if not isinstance(log_format, str):
        raise ConfigValidationError("'logging.format' must be a string")

    loggers = logging_data.get("loggers")
    if loggers is not None:
        if not isinstance(loggers, dict):
            raise ConfigValidationError("'logging.loggers' must be a mapping")
        for logger_name, logger_level in loggers.items():
            if not isinstance(logger_level, str):
                raise ConfigValidationError(
                    f"'logging.loggers.{logger_name}' must be a string"
                )

    return LoggingConfig(level=level, format=log_format, loggers=loggers)


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 項目が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f)

    if raw_data is None:
        return Config()
    if not isinstance(raw_data, dict):
        raise ConfigValidationError("Config root must be a mapping")

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data is not None:
        logging_config = _parse_logging(logging_data)

    # users (optional)
    users_data = data.get("users") or []
    if not isinstance(users_data, list):
        raise ConfigValidationError("'users' must be a list")
    users = [_parse_user_seed(item, i) for i, item in enumerate(users_data)]

    return Config(logging=logging_config, users=users)
