"""
Test Configuration - pytest配置文件

提供通用的测试fixture和测试标记定义。
"""

import random
from typing import Callable, List

import pytest

from fivecard.core.deck import Card, Deck
from fivecard.core.eval import Hand, HandEvaluator


@pytest.fixture
def evaluator() -> HandEvaluator:
    """评估器fixture"""
    return HandEvaluator()


@pytest.fixture
def seeded_deck() -> Deck:
    """使用固定种子洗好的牌组"""
    deck = Deck(random.Random(42))
    deck.shuffle()
    return deck


@pytest.fixture
def make_cards() -> Callable[[str], List[Card]]:
    """把"AH KD QS JC 10H"形式的字符串转为Card列表"""
    def _make(text: str) -> List[Card]:
        return [Card.from_str(token) for token in text.split()]
    return _make


@pytest.fixture
def make_hand() -> Callable[[str], Hand]:
    """把"AH KD QS JC 10H"形式的字符串转为Hand"""
    return Hand.from_str


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "anti_cheat: 标记需要反作弊检查的测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
