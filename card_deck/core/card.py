"""
扑克牌数据结构.

定义不可变的Card类和用于排序的绝对点数计算.
"""

import re
from dataclasses import dataclass
from typing import Union

from .exceptions import InvalidCardError
from .types import Suit, Rank, STANDARD_SUITS, MAX_RANK

# 王牌的绝对点数从所有标准牌之后开始
_JOKER_BASE = len(STANDARD_SUITS) * int(MAX_RANK) + 1

_CARD_PATTERN = re.compile(r"(\w+) of (\w+)", re.IGNORECASE)


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，没有花色和点数之外的身份，两张字段相同的牌可以互换.
    王牌的rank字段不是点数，只是区分多张王牌的序号(0, 1, 2...).

    Attributes:
        suit: 花色
        rank: 点数；王牌为非负整数序号

    Examples:
        >>> str(Card(Suit.SPADE, Rank.ACE))
        'Ace of Spades'
        >>> str(Card(Suit.JOKER, 0))
        'Joker'
    """

    suit: Suit
    rank: Union[Rank, int]

    def __post_init__(self) -> None:
        """
        验证并规范化花色和点数.

        Raises:
            InvalidCardError: 当花色或点数无效时
        """
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise InvalidCardError(f"无效的花色: {self.suit!r}") from None
        object.__setattr__(self, 'suit', suit)

        if suit is Suit.JOKER:
            if not isinstance(self.rank, int) or self.rank < 0:
                raise InvalidCardError(f"王牌序号必须是非负整数: {self.rank!r}")
            object.__setattr__(self, 'rank', int(self.rank))
            return

        try:
            rank = Rank(self.rank)
        except ValueError:
            raise InvalidCardError(f"无效的点数: {self.rank!r}") from None
        object.__setattr__(self, 'rank', rank)

    @property
    def is_joker(self) -> bool:
        """是否为王牌"""
        return self.suit is Suit.JOKER

    def __str__(self) -> str:
        """
        返回扑克牌的显示字符串.

        Returns:
            str: 王牌为 "Joker"，标准牌如 "Ace of Spades"
        """
        if self.is_joker:
            return self.suit.display_name
        return f"{self.rank.display_name} of {self.suit.display_name}s"

    def __repr__(self) -> str:
        if self.is_joker:
            return f"Card({self.suit.name}, {self.rank})"
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从显示字符串创建扑克牌对象.

        Args:
            card_str: 形如 "Queen of Diamonds" 或 "Joker" 的字符串，大小写不敏感

        Returns:
            Card: 对应的扑克牌；"Joker" 解析为序号0的王牌

        Raises:
            InvalidCardError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise InvalidCardError(f"输入必须是字符串，实际: {type(card_str)}")

        text = " ".join(card_str.split())
        if text.lower() == Suit.JOKER.display_name.lower():
            return cls(Suit.JOKER, 0)

        match = _CARD_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidCardError(f"卡牌字符串格式错误: {card_str}")

        rank_str, suit_str = match.groups()
        try:
            rank = Rank.from_name(rank_str)
            suit = Suit.from_name(suit_str)
        except KeyError as e:
            raise InvalidCardError(f"无法解析卡牌字符串 '{card_str}': {e}") from None

        if suit is Suit.JOKER:
            raise InvalidCardError(f"王牌没有点数: {card_str}")
        return cls(suit, rank)


def abs_rank(card: Card) -> int:
    """
    计算卡牌的绝对点数，用于跨花色的全序排序.

    标准牌为 花色序号 * 13 + 点数，每种花色占据互不重叠的区间:
    黑桃 1-13，方块 14-26，梅花 27-39，红桃 40-52.
    王牌固定排在所有标准牌之后，按序号排列.

    Args:
        card: 卡牌

    Returns:
        int: 绝对点数
    """
    if card.is_joker:
        return _JOKER_BASE + card.rank
    return int(card.suit) * int(MAX_RANK) + int(card.rank)
