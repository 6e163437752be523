"""
配置的单元测试.
"""

import logging

import pytest

from fivecard.core.config import AppConfig, DealConfig, LoggingConfig, setup_logging
from fivecard.core.exceptions import ConfigError


class TestLoggingConfig:
    """日志配置测试."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.log_level == 'INFO'
        assert config.enable_console_logging

    def test_level_normalized(self):
        """测试日志级别大小写不敏感."""
        assert LoggingConfig(log_level='debug').log_level == 'DEBUG'

    def test_invalid_level(self):
        with pytest.raises(ConfigError):
            LoggingConfig(log_level='VERBOSE')

    def test_setup_logging_sets_root_level(self):
        """测试setup_logging设置根日志级别."""
        root = logging.getLogger()
        original_level = root.level
        try:
            setup_logging(LoggingConfig(log_level='ERROR'))
            assert root.level == logging.ERROR
        finally:
            root.setLevel(original_level)


class TestDealConfig:
    """发牌配置测试."""

    def test_defaults(self):
        config = DealConfig()
        assert config.random_seed is None
        assert config.players == 2

    @pytest.mark.parametrize("players", [1, 11, 0, -2])
    def test_invalid_players(self, players):
        """测试玩家数超出2-10范围时报错."""
        with pytest.raises(ConfigError):
            DealConfig(players=players)

    def test_invalid_seed(self):
        with pytest.raises(ConfigError):
            DealConfig(random_seed="42")


class TestAppConfig:
    """应用配置测试."""

    def test_from_dict_partial(self):
        """测试只覆盖部分字段."""
        config = AppConfig.from_dict({'deal': {'random_seed': 7}})
        assert config.deal.random_seed == 7
        assert config.deal.players == 2
        assert config.logging.log_level == 'INFO'

    def test_from_dict_unknown_section(self):
        with pytest.raises(ConfigError):
            AppConfig.from_dict({'betting': {}})

    def test_from_dict_unknown_field(self):
        """测试未知字段转换为ConfigError."""
        with pytest.raises(ConfigError):
            AppConfig.from_dict({'deal': {'seed': 7}})
