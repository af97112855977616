"""
测试配置 - pytest配置文件

提供牌组测试的通用fixture和测试标记定义。
"""

import random

import pytest

from card_deck import build, jokers, new_standard_deck


@pytest.fixture
def standard_deck():
    """标准52张牌fixture"""
    return new_standard_deck()


@pytest.fixture
def deck_with_jokers():
    """52张标准牌加2张王牌fixture"""
    return build(jokers(2))


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(20240101)


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
