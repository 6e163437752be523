"""
配置相关类的实现
包含日志配置和发牌配置
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .exceptions import ConfigError


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# 52张牌每人5张，最多10人
MIN_PLAYERS = 2
MAX_PLAYERS = 10


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True

    def __post_init__(self):
        """验证配置的有效性"""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(f"无效的日志级别: {self.log_level}")


@dataclass
class DealConfig:
    """发牌配置"""
    random_seed: Optional[int] = None   # 随机种子，用于可重现的发牌
    players: int = 2                    # 参与比牌的人数

    def __post_init__(self):
        """验证配置的有效性"""
        if self.random_seed is not None and not isinstance(self.random_seed, int):
            raise ConfigError(f"随机种子必须是整数: {self.random_seed!r}")

        if not MIN_PLAYERS <= self.players <= MAX_PLAYERS:
            raise ConfigError(
                f"玩家数必须在{MIN_PLAYERS}-{MAX_PLAYERS}之间，实际: {self.players}"
            )


@dataclass
class AppConfig:
    """
    应用配置类
    汇总日志和发牌配置
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    deal: DealConfig = field(default_factory=DealConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        从字典创建配置，未给出的字段使用默认值

        Args:
            data: 形如{"logging": {...}, "deal": {...}}的字典

        Raises:
            ConfigError: 当存在未知字段或字段值无效时
        """
        unknown = set(data) - {'logging', 'deal'}
        if unknown:
            raise ConfigError(f"未知的配置项: {sorted(unknown)}")

        try:
            return cls(
                logging=LoggingConfig(**data.get('logging', {})),
                deal=DealConfig(**data.get('deal', {}))
            )
        except TypeError as e:
            raise ConfigError(f"配置字段错误: {e}") from e


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    根据配置初始化根日志记录器

    Args:
        config: 日志配置，为None时使用默认配置
    """
    config = config or LoggingConfig()
    level = getattr(logging, config.log_level)

    if config.enable_console_logging:
        logging.basicConfig(level=level, format=config.log_format)
    logging.getLogger().setLevel(level)
