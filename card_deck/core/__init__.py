"""
牌组核心模块.

包含花色/点数枚举、Card类、牌组构建函数和全部变换.
核心模块只依赖标准库，不依赖配置层或命令行层.
"""

from .types import Suit, Rank, STANDARD_SUITS, MIN_RANK, MAX_RANK, get_all_suits, get_all_ranks
from .card import Card, abs_rank
from .exceptions import DeckError, InvalidCardError, InvalidCountError
from .deck import (
    Deck, Transform, Less, LessFactory,
    new_standard_deck, build,
    less, rank_less, suit_less, reverse, sort_cards, default_sort,
    make_shuffle, shuffle,
    jokers, filter_cards, multiply,
)

__all__ = [
    # 类型
    'Suit', 'Rank', 'STANDARD_SUITS', 'MIN_RANK', 'MAX_RANK', 'get_all_suits', 'get_all_ranks',
    'Card', 'abs_rank', 'Deck', 'Transform', 'Less', 'LessFactory',

    # 异常
    'DeckError', 'InvalidCardError', 'InvalidCountError',

    # 构建与变换
    'new_standard_deck', 'build',
    'less', 'rank_less', 'suit_less', 'reverse', 'sort_cards', 'default_sort',
    'make_shuffle', 'shuffle',
    'jokers', 'filter_cards', 'multiply',
]
