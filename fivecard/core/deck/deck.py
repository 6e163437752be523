"""
扑克牌组管理.

定义Deck类，提供标准52张牌的管理功能，包括洗牌、发牌等操作.
牌组是评估核心之外的发牌来源，评估器本身不依赖它.
"""

import logging
import random
from typing import List, Optional

from ..exceptions import DeckExhaustedError
from .card import Card
from .types import get_all_suits, get_all_ranks


logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    包含52张标准扑克牌，支持洗牌、发牌等操作.
    使用可注入的随机数生成器以支持确定性测试，不使用全局随机状态.

    Attributes:
        _cards: 当前牌组中的牌列表
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck(random.Random(42))
        >>> deck.shuffle()
        >>> hand = deck.deal_hand()
        >>> len(deck)
        47
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌操作。如果为None，创建一个新的Random实例
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._reset_deck()

    def _reset_deck(self) -> None:
        """重置牌组为完整的52张牌."""
        self._cards = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]

    def shuffle(self) -> None:
        """洗牌，打乱剩余牌的顺序."""
        self._rng.shuffle(self._cards)

    def deal_card(self) -> Card:
        """
        发一张牌.

        Returns:
            Card: 发出的牌

        Raises:
            DeckExhaustedError: 当牌组为空时
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot deal from empty deck")
        return self._cards.pop()

    def draw_card(self) -> Optional[Card]:
        """
        发一张牌，牌组为空时返回None而不是抛出异常.

        Returns:
            Optional[Card]: 发出的牌，牌组为空时返回None
        """
        if not self._cards:
            logger.warning("牌组已发完，无法继续发牌")
            return None
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        牌数不足时不发出任何牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 发出的牌列表

        Raises:
            ValueError: 当count为负数时
            DeckExhaustedError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise DeckExhaustedError(
                f"Cannot deal {count} cards, only {len(self._cards)} remaining"
            )

        return [self.deal_card() for _ in range(count)]

    def deal_hand(self) -> 'Hand':
        """
        发一手5张牌.

        Returns:
            Hand: 由5张新发出的牌组成的手牌

        Raises:
            DeckExhaustedError: 当牌组中不足5张牌时
        """
        # 延迟导入，避免deck与eval之间的循环依赖
        from ..eval.hand import Hand, HAND_SIZE

        return Hand(self.deal_cards(HAND_SIZE))

    @property
    def cards_remaining(self) -> int:
        """剩余牌数."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """牌组是否为空."""
        return len(self._cards) == 0

    def reset(self) -> None:
        """重置牌组为完整的52张牌（未洗牌顺序）."""
        self._reset_deck()

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
