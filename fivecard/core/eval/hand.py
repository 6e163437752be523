"""
五张手牌.

定义Hand类：保存恰好5张互不相同的牌，负责排序和牌型判断.
所有多张同点数的判断都基于点数计数（点数 -> 出现次数），不依赖排序后的下标位置.
"""

from collections import Counter
from typing import Iterable, List, Tuple

from ..deck.card import Card
from ..exceptions import DuplicateCardError, HandSizeError
from .types import HandCategory


HAND_SIZE = 5


class Hand:
    """
    一手5张牌.

    构造时校验牌数和重复牌，之后只允许排序，不允许增删牌.
    牌型每次调用时都从当前牌序列重新计算，不做缓存.

    Examples:
        >>> hand = Hand([Card.from_str(s) for s in "KH KD KS 10C 10H".split()])
        >>> hand.category
        <HandCategory.FULL_HOUSE: 7>
    """

    def __init__(self, cards: Iterable[Card]) -> None:
        """
        初始化手牌.

        Args:
            cards: 恰好5张扑克牌

        Raises:
            TypeError: 当存在非Card元素时
            HandSizeError: 当牌数不等于5时
            DuplicateCardError: 当存在重复的牌时
        """
        card_list = list(cards)

        for i, card in enumerate(card_list):
            if not isinstance(card, Card):
                raise TypeError(f"第{i}张牌必须是Card类型，实际: {type(card)}")

        if len(card_list) != HAND_SIZE:
            raise HandSizeError(f"手牌必须是{HAND_SIZE}张，实际: {len(card_list)}")

        if len(set(card_list)) != HAND_SIZE:
            duplicates = sorted(
                {str(card) for card in card_list if card_list.count(card) > 1}
            )
            raise DuplicateCardError(f"手牌中存在重复的牌: {', '.join(duplicates)}")

        self._cards: List[Card] = card_list

    @classmethod
    def from_str(cls, hand_str: str) -> 'Hand':
        """
        从空格分隔的字符串创建手牌，如"AH KD QS JC 10H".

        Raises:
            InvalidCardError: 当某张牌无法解析时
            HandSizeError: 当牌数不等于5时
            DuplicateCardError: 当存在重复的牌时
        """
        return cls(Card.from_str(token) for token in hand_str.split())

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前的牌序列（只读）."""
        return tuple(self._cards)

    def sort(self) -> None:
        """按点数升序稳定排序，重复调用不改变结果."""
        self._cards.sort(key=lambda card: card.rank.value)

    @property
    def is_sorted(self) -> bool:
        return all(a.rank <= b.rank for a, b in zip(self._cards, self._cards[1:]))

    def ranks(self) -> List[int]:
        """排序后的点数列表（升序）."""
        self.sort()
        return [card.rank.value for card in self._cards]

    def rank_counts(self) -> Counter:
        """点数 -> 出现次数."""
        return Counter(card.rank.value for card in self._cards)

    def count_pattern(self) -> Tuple[int, ...]:
        """
        点数出现次数的多重集合，按降序排列.

        Returns:
            Tuple[int, ...]: 如葫芦为(3, 2)，两对为(2, 2, 1)
        """
        return tuple(sorted(self.rank_counts().values(), reverse=True))

    def groups(self) -> List[Tuple[int, int]]:
        """
        按(出现次数, 点数)降序排列的点数分组.

        Returns:
            List[Tuple[int, int]]: 每项为(点数, 出现次数)，如葫芦KKK1010为[(13, 3), (10, 2)]
        """
        ordered = sorted(
            self.rank_counts().items(),
            key=lambda item: (item[1], item[0]),
            reverse=True
        )
        return [(rank, count) for rank, count in ordered]

    def is_pair(self) -> bool:
        return self.count_pattern() == (2, 1, 1, 1)

    def is_set(self) -> bool:
        return self.count_pattern() == (3, 1, 1)

    def is_two_pair(self) -> bool:
        return self.count_pattern() == (2, 2, 1)

    def is_straight(self) -> bool:
        """五张点数连续，A只算最大，A-2-3-4-5不是顺子."""
        ranks = self.ranks()
        return all(high - low == 1 for low, high in zip(ranks, ranks[1:]))

    def is_flush(self) -> bool:
        return len({card.suit for card in self._cards}) == 1

    def is_full_house(self) -> bool:
        return self.count_pattern() == (3, 2)

    def is_quad(self) -> bool:
        return self.count_pattern() == (4, 1)

    def is_straight_flush(self) -> bool:
        return self.is_straight() and self.is_flush()

    @property
    def category(self) -> HandCategory:
        """
        按优先级判断牌型，第一个满足的牌型胜出.

        Returns:
            HandCategory: 牌型
        """
        self.sort()

        if self.is_straight_flush():
            return HandCategory.STRAIGHT_FLUSH
        if self.is_quad():
            return HandCategory.QUAD
        if self.is_full_house():
            return HandCategory.FULL_HOUSE
        if self.is_flush():
            return HandCategory.FLUSH
        if self.is_straight():
            return HandCategory.STRAIGHT
        if self.is_set():
            return HandCategory.SET
        if self.is_two_pair():
            return HandCategory.TWO_PAIR
        if self.is_pair():
            return HandCategory.PAIR
        return HandCategory.HIGH_CARD

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand([{', '.join(repr(card) for card in self._cards)}])"
