"""設定データクラス"""

from dataclasses import dataclass, field

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    loggers: dict[str, str] | None = None


@dataclass
class UserSeed:
    """インメモリリポジトリの初期ユーザー"""

    id: int
    name: str


@dataclass
class Config:
    """アプリケーション設定"""

    logging: LoggingConfig | None = None
    users: list[UserSeed] = field(default_factory=list)
