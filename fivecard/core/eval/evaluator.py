"""
五张牌评估器.

提供牌型识别、分数计算和两手牌比较功能.

分数编码:
    score = category * 16**5 + sum(tie_breakers[i] * 16**(4 - i))

tie_breakers按(组大小降序, 点数降序)列出每组的点数，不足5位补0.
每一位最大为14，小于进制16，因此踢脚牌的任何组合都不会进入更高牌型的分数区间.
"""

import logging
from typing import Iterable, Tuple, Union

from ..deck.card import Card
from .hand import Hand, HAND_SIZE
from .types import HandCategory, HandResult, ShowdownOutcome


logger = logging.getLogger(__name__)

SCORE_BASE = 16

HandLike = Union[Hand, Iterable[Card]]


def _as_hand(cards: HandLike) -> Hand:
    if isinstance(cards, Hand):
        return cards
    return Hand(cards)


class HandEvaluator:
    """
    五张牌评估器.

    无状态，可以重复使用. 接受Hand对象或5张Card的可迭代对象.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> kings = Hand.from_str("KH KD KS 10C 10H")
        >>> queens = Hand.from_str("QH QD QS AC AH")
        >>> evaluator.showdown(kings, queens)
        <ShowdownOutcome.FIRST: 'first'>
    """

    def classify(self, cards: HandLike) -> HandCategory:
        """
        判断手牌的牌型.

        Args:
            cards: Hand或5张牌

        Returns:
            HandCategory: 牌型
        """
        return _as_hand(cards).category

    def tie_breakers(self, cards: HandLike) -> Tuple[int, ...]:
        """
        计算同牌型比较时使用的点数序列.

        先比较组大小更大的点数（四条、三条、对子），组大小相同时点数大的在前，
        最后是踢脚牌降序. 顺子、同花和高牌即为5张点数降序.

        Args:
            cards: Hand或5张牌

        Returns:
            Tuple[int, ...]: 点数序列，如两对KK77A为(13, 7, 14)
        """
        hand = _as_hand(cards)
        hand.sort()
        return tuple(rank for rank, _ in hand.groups())

    def score(self, cards: HandLike) -> int:
        """
        计算手牌分数.

        分数越高牌越大，分数相等为平局. 与牌的输入顺序无关.

        Args:
            cards: Hand或5张牌

        Returns:
            int: 整数分数
        """
        hand = _as_hand(cards)
        category = hand.category
        return self._encode(category, self.tie_breakers(hand))

    def evaluate(self, cards: HandLike) -> HandResult:
        """
        评估手牌，返回包含牌型和分数的完整结果.

        Args:
            cards: Hand或5张牌

        Returns:
            HandResult: 评估结果

        Raises:
            TypeError: 当存在非Card元素时
            HandSizeError: 当牌数不等于5时
            DuplicateCardError: 当存在重复的牌时
        """
        hand = _as_hand(cards)
        category = hand.category
        tie_breakers = self.tie_breakers(hand)
        score = self._encode(category, tie_breakers)

        logger.debug(f"[手牌评估] {hand} -> {category.name}, 比较序列: {tie_breakers}, 分数: {score}")

        return HandResult(
            category=category,
            score=score,
            cards=hand.cards,
            tie_breakers=tie_breakers
        )

    def compare_hands(self, hand1: HandLike, hand2: HandLike) -> int:
        """
        比较两手牌的强弱.

        Args:
            hand1: 第一手牌（Hand、5张牌或HandResult）
            hand2: 第二手牌（Hand、5张牌或HandResult）

        Returns:
            int: 1表示hand1更强，-1表示hand2更强，0表示相等
        """
        result1 = hand1 if isinstance(hand1, HandResult) else self.evaluate(hand1)
        result2 = hand2 if isinstance(hand2, HandResult) else self.evaluate(hand2)
        return result1.compare_to(result2)

    def showdown(self, hand1: HandLike, hand2: HandLike) -> ShowdownOutcome:
        """
        比较两手牌并给出胜负.

        Args:
            hand1: 第一手牌
            hand2: 第二手牌

        Returns:
            ShowdownOutcome: FIRST、SECOND或TIE
        """
        result1 = self.evaluate(hand1)
        result2 = self.evaluate(hand2)

        comparison = result1.compare_to(result2)
        if comparison > 0:
            outcome = ShowdownOutcome.FIRST
        elif comparison < 0:
            outcome = ShowdownOutcome.SECOND
        else:
            outcome = ShowdownOutcome.TIE

        logger.info(f"[比牌] {result1} ({result1.score}) vs {result2} ({result2.score}) -> {outcome.name}")
        return outcome

    @staticmethod
    def _encode(category: HandCategory, tie_breakers: Tuple[int, ...]) -> int:
        digits = list(tie_breakers) + [0] * (HAND_SIZE - len(tie_breakers))
        score = int(category)
        for digit in digits:
            score = score * SCORE_BASE + digit
        return score
