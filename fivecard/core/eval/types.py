"""
五张牌评估相关类型定义.

定义牌型等级、评估结果、比牌结果等核心数据结构.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

from ..deck.card import Card
from ..deck.types import get_rank_name


class HandCategory(IntEnum):
    """
    牌型枚举.

    数值越大表示牌型越强，数值同时作为分数的最高位.
    """

    HIGH_CARD = 1          # 高牌
    PAIR = 2               # 一对
    TWO_PAIR = 3           # 两对
    SET = 4                # 三条
    STRAIGHT = 5           # 顺子
    FLUSH = 6              # 同花
    FULL_HOUSE = 7         # 葫芦
    QUAD = 8               # 四条
    STRAIGHT_FLUSH = 9     # 同花顺

    @property
    def display_name(self) -> str:
        """牌型的英文显示名称."""
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.SET: "Set",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.QUAD: "Quad",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


class ShowdownOutcome(Enum):
    """两手牌比较的结果."""

    FIRST = "first"    # 第一手牌获胜
    SECOND = "second"  # 第二手牌获胜
    TIE = "tie"        # 平局


@dataclass(frozen=True)
class HandResult:
    """
    牌型评估结果.

    包含牌型、分数、排序后的手牌以及组成分数的比较序列.

    Attributes:
        category: 牌型
        score: 整数分数，分数越高牌越大，分数相等为平局
        cards: 按点数升序排列的5张牌
        tie_breakers: 用于同牌型比较的点数序列，先按组大小再按点数降序

    Examples:
        >>> result = HandEvaluator().evaluate(cards)
        >>> result.category
        <HandCategory.FULL_HOUSE: 7>
        >>> result.tie_breakers
        (13, 10)
    """

    category: HandCategory
    score: int
    cards: Tuple[Card, ...]
    tie_breakers: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """
        验证评估结果的有效性.

        Raises:
            TypeError: 当牌型类型无效时
            ValueError: 当分数或比较序列无效时
        """
        if not isinstance(self.category, HandCategory):
            raise TypeError(f"牌型必须是HandCategory类型，实际: {type(self.category)}")

        if self.score <= 0:
            raise ValueError(f"无效的分数: {self.score}")

        for value in self.tie_breakers:
            if value < 2 or value > 14:
                raise ValueError(f"无效的比较牌值: {value}")

    def compare_to(self, other: 'HandResult') -> int:
        """
        比较两个牌型的强弱.

        Args:
            other: 另一个牌型评估结果

        Returns:
            int: 1表示当前牌型更强，-1表示更弱，0表示相等

        Raises:
            TypeError: 当other不是HandResult类型时
        """
        if not isinstance(other, HandResult):
            raise TypeError(f"比较对象必须是HandResult类型，实际: {type(other)}")

        if self.score == other.score:
            return 0
        return 1 if self.score > other.score else -1

    def __str__(self) -> str:
        name = self.category.display_name
        if not self.tie_breakers:
            return name

        lead = get_rank_name(self.tie_breakers[0])
        if self.category == HandCategory.TWO_PAIR:
            return f"{name} ({lead} and {get_rank_name(self.tie_breakers[1])})"
        elif self.category == HandCategory.FULL_HOUSE:
            return f"{name} ({lead} over {get_rank_name(self.tie_breakers[1])})"
        elif self.category in (HandCategory.PAIR, HandCategory.SET, HandCategory.QUAD):
            return f"{name} ({lead})"
        else:
            return f"{name} ({lead} high)"
