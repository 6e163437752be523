"""
扑克牌基础类型定义.

定义扑克牌的花色、点数枚举，以及用于展示层的名称查询函数.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, List


class Suit(Enum):
    """
    扑克牌花色枚举.

    定义四种标准扑克牌花色，使用Unicode符号表示.
    花色之间没有大小关系，只支持相等比较.
    """

    HEARTS = "♥"      # 红桃
    DIAMONDS = "♦"    # 方块
    SPADES = "♠"      # 黑桃
    CLUBS = "♣"       # 梅花


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数，数值越大表示点数越大.
    A只作为最大的牌，不参与A-2-3-4-5顺子.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


UNKNOWN_NAME = "Unknown"

_RANK_NAMES: Dict[int, str] = {
    2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six",
    7: "Seven", 8: "Eight", 9: "Nine", 10: "Ten",
    11: "Jack", 12: "Queen", 13: "King", 14: "Ace"
}

_SUIT_NAMES: Dict[Suit, str] = {
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.SPADES: "Spades",
    Suit.CLUBS: "Clubs"
}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 包含所有13种点数的列表
    """
    return list(Rank)


def get_rank_name(rank: Any) -> str:
    """
    获取点数的显示名称.

    接受Rank枚举或原始整数值，超出范围时返回"Unknown"而不是抛出异常.

    Args:
        rank: 点数，Rank枚举或整数

    Returns:
        str: 点数名称，如"Ace"
    """
    # bool是int的子类，不能当作点数
    if isinstance(rank, bool) or not isinstance(rank, int):
        return UNKNOWN_NAME
    return _RANK_NAMES.get(int(rank), UNKNOWN_NAME)


def get_suit_name(suit: Any) -> str:
    """
    获取花色的显示名称.

    接受Suit枚举或其符号值（如"♥"），无法识别时返回"Unknown".

    Args:
        suit: 花色，Suit枚举或符号字符串

    Returns:
        str: 花色名称，如"Hearts"
    """
    if isinstance(suit, Suit):
        return _SUIT_NAMES[suit]
    try:
        return _SUIT_NAMES[Suit(suit)]
    except (ValueError, TypeError):
        return UNKNOWN_NAME
