"""
扑克牌数据结构.

定义不可变的Card类，支持严格的类型检查和完整的操作接口.
"""

from dataclasses import dataclass
from typing import Dict

from ..exceptions import InvalidCardError
from .types import Suit, Rank, get_rank_name, get_suit_name


_RANK_DISPLAY: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}

_SUIT_DISPLAY: Dict[Suit, str] = {
    Suit.HEARTS: "H", Suit.DIAMONDS: "D",
    Suit.SPADES: "S", Suit.CLUBS: "C"
}

_RANK_PARSE: Dict[str, Rank] = {
    "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR, "5": Rank.FIVE,
    "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT, "9": Rank.NINE,
    "10": Rank.TEN, "T": Rank.TEN, "J": Rank.JACK, "Q": Rank.QUEEN,
    "K": Rank.KING, "A": Rank.ACE
}

_SUIT_PARSE: Dict[str, Suit] = {
    "H": Suit.HEARTS, "D": Suit.DIAMONDS, "S": Suit.SPADES, "C": Suit.CLUBS,
    "♥": Suit.HEARTS, "♦": Suit.DIAMONDS, "♠": Suit.SPADES, "♣": Suit.CLUBS
}


@dataclass(frozen=True, eq=False)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，由点数和花色组成.
    相等比较同时比较点数和花色，大小比较（用于排序）只比较点数.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.HEARTS)
        >>> str(card)
        'AH'
        >>> card.describe()
        'Ace of Hearts'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def __str__(self) -> str:
        return f"{_RANK_DISPLAY[self.rank]}{_SUIT_DISPLAY[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def describe(self) -> str:
        """
        返回扑克牌的英文全称.

        Returns:
            str: 如"Ace of Hearts"
        """
        return f"{get_rank_name(self.rank)} of {get_suit_name(self.suit)}"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"10d"、"Ts"、"K♠"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            InvalidCardError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip().upper()
        if len(text) < 2:
            raise InvalidCardError(f"卡牌字符串格式错误: {card_str!r}")

        # 处理10的特殊情况
        if text.startswith("10"):
            rank_str, suit_str = "10", text[2:]
        else:
            rank_str, suit_str = text[0], text[1:]

        if rank_str not in _RANK_PARSE:
            raise InvalidCardError(f"无效的点数: {card_str!r}")
        if suit_str not in _SUIT_PARSE:
            raise InvalidCardError(f"无效的花色: {card_str!r}")

        return cls(_RANK_PARSE[rank_str], _SUIT_PARSE[suit_str])

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.value < other.rank.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))
