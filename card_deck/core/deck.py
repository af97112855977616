"""
牌组构建与变换.

牌组就是一个有序的Card列表. build()生成标准52张牌，再依次应用调用方
传入的变换函数；每个变换接收上一步的牌组并返回新的牌组.

所有变换都不修改输入列表，总是返回新列表.
"""

import logging
import random
import threading
import time
from functools import cmp_to_key, reduce
from typing import Callable, List, Optional, Sequence

from .card import Card, abs_rank
from .exceptions import InvalidCountError
from .types import Suit, get_all_suits, get_all_ranks

logger = logging.getLogger(__name__)

Deck = List[Card]
Transform = Callable[[Deck], Deck]
Less = Callable[[int, int], bool]
LessFactory = Callable[[Sequence[Card]], Less]


def new_standard_deck() -> Deck:
    """
    生成标准52张牌.

    Returns:
        Deck: 按花色优先、点数其次排列的牌组（黑桃A..K，方块A..K，梅花，红桃）
    """
    return [
        Card(suit, rank)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]


def build(*transforms: Transform) -> Deck:
    """
    构建牌组.

    先生成标准52张牌，再按给定顺序依次应用变换，每个变换接收上一步的结果.
    不传变换时返回标准顺序的52张牌.

    Args:
        *transforms: 变换函数，签名为 (Deck) -> Deck

    Returns:
        Deck: 应用全部变换后的牌组

    Examples:
        >>> cards = build(jokers(2), shuffle)
        >>> len(cards)
        54
    """
    cards = new_standard_deck()
    logger.debug(f"构建牌组: {len(cards)} 张基础牌, {len(transforms)} 个变换")
    return reduce(_apply, transforms, cards)


def _apply(cards: Deck, transform: Transform) -> Deck:
    result = transform(cards)
    logger.debug(f"应用变换 {getattr(transform, '__name__', repr(transform))}: "
                 f"{len(cards)} -> {len(result)} 张")
    return result


# ==============================================
# 排序
# ==============================================

def less(cards: Sequence[Card]) -> Less:
    """
    默认比较函数工厂，按绝对点数升序.

    Args:
        cards: 待排序的牌组

    Returns:
        Less: less(i, j) 在第i张牌应排在第j张之前时返回True
    """
    def _less(i: int, j: int) -> bool:
        return abs_rank(cards[i]) < abs_rank(cards[j])
    return _less


def rank_less(cards: Sequence[Card]) -> Less:
    """只按点数比较，同点数的牌保持原有相对顺序."""
    def _less(i: int, j: int) -> bool:
        return cards[i].rank < cards[j].rank
    return _less


def suit_less(cards: Sequence[Card]) -> Less:
    """只按花色比较，同花色的牌保持原有相对顺序."""
    def _less(i: int, j: int) -> bool:
        return cards[i].suit < cards[j].suit
    return _less


def reverse(less_factory: LessFactory) -> LessFactory:
    """
    将比较函数工厂反转为降序.

    Args:
        less_factory: 升序的比较函数工厂

    Returns:
        LessFactory: 交换参数顺序后的工厂
    """
    def _factory(cards: Sequence[Card]) -> Less:
        base = less_factory(cards)
        return lambda i, j: base(j, i)
    return _factory


def sort_cards(less_factory: LessFactory) -> Transform:
    """
    创建自定义排序变换.

    每次调用都会用当前传入的牌组重新生成比较函数，因此同一个变换可以
    安全地用于不同牌组. 排序是稳定的：比较结果相等的牌保持原有顺序.

    Args:
        less_factory: 接收牌组、返回 less(i, j) 的函数

    Returns:
        Transform: 返回排序后新列表的变换
    """
    def _sort(cards: Deck) -> Deck:
        snapshot = list(cards)
        less_ij = less_factory(snapshot)

        def _compare(i: int, j: int) -> int:
            if less_ij(i, j):
                return -1
            if less_ij(j, i):
                return 1
            return 0

        order = sorted(range(len(snapshot)), key=cmp_to_key(_compare))
        return [snapshot[i] for i in order]

    _sort.__name__ = f"sort_cards({getattr(less_factory, '__name__', 'less')})"
    return _sort


def default_sort(cards: Deck) -> Deck:
    """
    按默认顺序排序：黑桃、方块、梅花、红桃，各花色内A到K，王牌在最后.

    Args:
        cards: 牌组

    Returns:
        Deck: 排序后的新牌组
    """
    return _default_sort(cards)


_default_sort = sort_cards(less)


# ==============================================
# 洗牌
# ==============================================

def make_shuffle(rng: Optional[random.Random] = None,
                 seed: Optional[int] = None) -> Transform:
    """
    创建洗牌变换.

    变换持有一个随机数生成器，多线程调用时通过锁串行访问.
    使用相同种子创建的洗牌变换产生相同的洗牌序列，便于确定性测试.

    Args:
        rng: 随机数生成器，提供时忽略seed
        seed: 随机种子，默认使用当前时间（纳秒）

    Returns:
        Transform: 返回输入牌组一个均匀随机排列的变换
    """
    if rng is None:
        if seed is None:
            seed = time.time_ns()
        rng = random.Random(seed)
    lock = threading.Lock()

    def _shuffle(cards: Deck) -> Deck:
        with lock:
            return rng.sample(cards, len(cards))

    _shuffle.__name__ = "shuffle"
    return _shuffle


# 进程级默认洗牌器，导入时以当前时间为种子
_default_shuffle = make_shuffle()


def shuffle(cards: Deck) -> Deck:
    """
    使用进程级默认生成器洗牌.

    注意：种子在模块导入时确定，需要可重现结果时请使用make_shuffle(seed=...).

    Args:
        cards: 牌组

    Returns:
        Deck: 随机排列后的新牌组
    """
    return _default_shuffle(cards)


# ==============================================
# 增减与复制
# ==============================================

def jokers(n: int) -> Transform:
    """
    创建添加王牌的变换.

    在牌组末尾追加n张王牌，序号依次为0..n-1，仅用于区分各张王牌.

    Args:
        n: 王牌数量

    Returns:
        Transform: 追加王牌的变换

    Raises:
        InvalidCountError: 当n为负数时
    """
    _check_count("王牌数量", n)

    def _jokers(cards: Deck) -> Deck:
        return list(cards) + [Card(Suit.JOKER, i) for i in range(n)]

    _jokers.__name__ = f"jokers({n})"
    return _jokers


def filter_cards(predicate: Callable[[Card], bool]) -> Transform:
    """
    创建过滤变换.

    注意predicate表示"是否移除"：返回True的牌被移除，其余牌按原顺序保留.

    Args:
        predicate: 判断卡牌是否应被移除的函数

    Returns:
        Transform: 过滤后的新牌组，可能为空
    """
    def _filter(cards: Deck) -> Deck:
        return [card for card in cards if not predicate(card)]

    _filter.__name__ = f"filter_cards({getattr(predicate, '__name__', 'predicate')})"
    return _filter


def multiply(n: int) -> Transform:
    """
    创建复制牌组的变换.

    将输入牌组首尾相接复制n份. n=0 得到空牌组，n=1 等价于原牌组.

    Args:
        n: 份数

    Returns:
        Transform: 复制后的新牌组

    Raises:
        InvalidCountError: 当n为负数时
    """
    _check_count("牌组份数", n)

    def _multiply(cards: Deck) -> Deck:
        return list(cards) * n

    _multiply.__name__ = f"multiply({n})"
    return _multiply


def _check_count(label: str, n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidCountError(f"{label}必须是整数，实际: {type(n)}")
    if n < 0:
        raise InvalidCountError(f"{label}不能为负数: {n}")
