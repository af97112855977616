"""
扑克牌基础类型定义.

定义花色、点数枚举以及构建标准牌组所需的常量.
枚举的整数值参与绝对点数计算，不可随意调整顺序.
"""

from enum import IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    整数值即花色序号: 黑桃=0, 方块=1, 梅花=2, 红桃=3.
    JOKER 是特殊花色，不属于四种标准花色.
    """

    SPADE = 0       # 黑桃
    DIAMOND = 1     # 方块
    CLUB = 2        # 梅花
    HEART = 3       # 红桃
    JOKER = 4       # 王牌

    @property
    def display_name(self) -> str:
        """返回花色的显示名称，如 "Spade"."""
        return _SUIT_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> 'Suit':
        """
        按名称查找花色，大小写不敏感，接受单复数形式.

        Args:
            name: 花色名称，如 "spade"、"Hearts"

        Returns:
            Suit: 对应的花色

        Raises:
            KeyError: 当名称无法识别时
        """
        key = name.strip().lower()
        for suit, suit_name in _SUIT_NAMES.items():
            lowered = suit_name.lower()
            if key in (lowered, lowered + "s"):
                return suit
        raise KeyError(name)


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    A 为最小的 1，K 为最大的 13. 0 保留不用，王牌用同一字段存放序号.
    """

    ACE = 1
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

    @property
    def display_name(self) -> str:
        """返回点数的显示名称，如 "Ace"."""
        return _RANK_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> 'Rank':
        """
        按名称或数字查找点数.

        Args:
            name: 点数名称或数字，如 "queen"、"Kings"、"7"

        Returns:
            Rank: 对应的点数

        Raises:
            KeyError: 当名称无法识别时
        """
        key = name.strip().lower()
        if key.isdigit():
            try:
                return cls(int(key))
            except ValueError:
                raise KeyError(name) from None
        for rank, rank_name in _RANK_NAMES.items():
            lowered = rank_name.lower()
            if key in (lowered, lowered + "s"):
                return rank
        raise KeyError(name)


_SUIT_NAMES: Dict[Suit, str] = {
    Suit.SPADE: "Spade",
    Suit.DIAMOND: "Diamond",
    Suit.CLUB: "Club",
    Suit.HEART: "Heart",
    Suit.JOKER: "Joker",
}

_RANK_NAMES: Dict[Rank, str] = {
    Rank.ACE: "Ace", Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
    Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven", Rank.EIGHT: "Eight",
    Rank.NINE: "Nine", Rank.TEN: "Ten", Rank.JACK: "Jack", Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

# 标准牌组的花色顺序，同时决定默认排序
STANDARD_SUITS = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)

MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING


def get_all_suits() -> List[Suit]:
    """
    获取所有标准花色.

    Returns:
        List[Suit]: 按牌组顺序排列的四种花色，不含 JOKER
    """
    return list(STANDARD_SUITS)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从 A 到 K 的13种点数
    """
    return list(Rank)
