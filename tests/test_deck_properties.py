"""
牌组变换属性测试 - 基于hypothesis

对任意排列、任意数量的输入验证变换的不变量：
排序还原标准顺序、洗牌保持多重集、过滤保持相对顺序、复制按份数拼接。
"""

from collections import Counter

import pytest
from hypothesis import given, settings, strategies as st

from card_deck import (
    Card, Suit, Rank, build, new_standard_deck, default_sort, sort_cards, less,
    make_shuffle, jokers, filter_cards, multiply,
)

STANDARD_DECK = new_standard_deck()

# Hypothesis策略定义
standard_card_strategy = st.builds(Card, st.sampled_from(list(Suit)[:4]), st.sampled_from(list(Rank)))
joker_card_strategy = st.builds(Card, st.just(Suit.JOKER), st.integers(min_value=0, max_value=9))
card_strategy = st.one_of(standard_card_strategy, joker_card_strategy)
deck_strategy = st.lists(card_strategy, max_size=60)
count_strategy = st.integers(min_value=0, max_value=6)


@pytest.mark.property_test
@given(st.permutations(STANDARD_DECK))
def test_default_sort_restores_any_permutation(cards):
    """任意排列经默认排序都还原为标准顺序"""
    assert default_sort(cards) == STANDARD_DECK


@pytest.mark.property_test
@given(deck_strategy)
def test_default_sort_idempotent(cards):
    """排序两次与排序一次结果相同"""
    once = default_sort(cards)
    assert default_sort(once) == once
    assert Counter(once) == Counter(cards)


@pytest.mark.property_test
@given(deck_strategy)
def test_custom_sort_matches_default(cards):
    """使用默认比较函数的自定义排序与默认排序一致"""
    assert sort_cards(less)(cards) == default_sort(cards)


@pytest.mark.property_test
@settings(max_examples=50)
@given(deck_strategy, st.integers())
def test_shuffle_preserves_multiset(cards, seed):
    """洗牌结果与输入是同一个多重集"""
    result = make_shuffle(seed=seed)(cards)
    assert len(result) == len(cards)
    assert Counter(result) == Counter(cards)


@pytest.mark.property_test
@given(deck_strategy, count_strategy)
def test_jokers_append_indexed_jokers(cards, n):
    """追加的王牌位于末尾，序号为0..n-1"""
    result = jokers(n)(cards)
    assert result[:len(cards)] == cards
    assert result[len(cards):] == [Card(Suit.JOKER, i) for i in range(n)]


@pytest.mark.property_test
@given(deck_strategy, st.sampled_from(list(Rank)))
def test_filter_keeps_relative_order(cards, rank):
    """过滤后的牌保持原有相对顺序，且不含被移除的牌"""
    def removed(card):
        return not card.is_joker and card.rank == rank

    result = filter_cards(removed)(cards)
    assert result == [c for c in cards if not removed(c)]
    assert not any(removed(c) for c in result)


@pytest.mark.property_test
@given(deck_strategy, count_strategy)
def test_multiply_concatenates_copies(cards, n):
    """复制n份等于n份输入首尾相接"""
    result = multiply(n)(cards)
    assert len(result) == len(cards) * n
    for i in range(n):
        assert result[i * len(cards):(i + 1) * len(cards)] == cards


@pytest.mark.property_test
@given(count_strategy, count_strategy)
def test_build_pipeline_sizes(joker_count, deck_count):
    """王牌与复制组合后的牌数"""
    cards = build(jokers(joker_count), multiply(deck_count))
    assert len(cards) == (52 + joker_count) * deck_count
    assert sum(1 for c in cards if c.is_joker) == joker_count * deck_count
